from pydantic import Field
from typing import Optional

from .base import FrozenGolfModel


class StrokesGained(FrozenGolfModel):
    """Strokes gained for one round, relative to expectation.

    A component is None when the stat behind it was not tracked. ``residual``
    is the part of ``total`` no tracked component explains.
    """
    total: Optional[float] = None
    off_tee: Optional[float] = None
    approach: Optional[float] = None
    putting: Optional[float] = None
    penalties: Optional[float] = None
    residual: Optional[float] = Field(None)
