from services.insight_service import PostRoundInsightService, visible_message_count

__all__ = ["PostRoundInsightService", "visible_message_count"]
