"""Authored phrasing pools, one tuple per outcome (and area for message 3).

Slots use ``{Name}`` markers and are filled by ``formatting.fill_template``.
Every pool is rendered through the copy guard in tests, so a new variant that
slips in filler phrasing fails the build.

Message 3 action sentences must stay single sentences: message 3 is one
sentence without a tracking clause and two with one.
"""

NEXT_ROUND_LEAD = "Next round:"

# ================================================================
# Message 1: what defined the round
# ================================================================

M1_A_VARIANTS = (
    "{scoreSentence} Only the score was logged, so there is no breakdown by area for this round.",
    "{scoreSentence} With no fairways, greens, putts, or penalties logged, the score has to speak for itself.",
    "{scoreSentence} Because no supporting stats were logged, the takeaways stay broad for this round.",
    "{scoreSentence} The score is in, but there is not enough round detail to tie it to one part of the game.",
    "{scoreSentence} This round was logged as score only, so strengths and leaks stay hidden.",
    "{scoreSentence} No advanced stats came in with this round, so the story stays at the scorecard level.",
    "{scoreSentence} Score-only logging keeps the picture simple: the total is known, the drivers are not.",
    "{scoreSentence} Without fairways, greens, putts, or penalties, the round cannot be split into parts yet.",
    "{scoreSentence} The total is logged, and the stats behind it were left blank this time.",
    "{scoreSentence} Score alone was recorded, which saves the breakdown for another round.",
)

M1_B_VARIANTS = (
    "{scoreSentence} {BestLabel} held up best among the measured areas, losing {bestAbs1} strokes{evidence}.",
    "{scoreSentence} {BestLabel} was the steadiest measured area at {bestAbs1} strokes lost{evidence}.",
    "{scoreSentence} Among what was tracked, {BestLabel} had the smallest loss at {bestAbs1} strokes{evidence}.",
    "{scoreSentence} {BestLabel} was the least costly measured area at {bestAbs1} strokes{evidence}.",
    "{scoreSentence} Every tracked area gave back strokes, and {BestLabel} gave back the fewest at {bestAbs1}{evidence}.",
    "{scoreSentence} {BestLabel} did the least damage of the tracked areas, costing {bestAbs1} strokes{evidence}.",
    "{scoreSentence} The smallest measured loss came from {BestLabel} at {bestAbs1} strokes{evidence}.",
    "{scoreSentence} {BestLabel} kept the damage lowest at {bestAbs1} strokes lost{evidence}.",
    "{scoreSentence} No tracked area finished positive, and {BestLabel} was closest at {bestAbs1} strokes lost{evidence}.",
    "{scoreSentence} {BestLabel} was your most stable measured area, still losing {bestAbs1} strokes{evidence}.",
)

M1_SINGLE_B_VARIANTS = (
    "{scoreSentence} Only {BestLabel} was tracked, and it cost {bestAbs1} strokes{evidence}.",
    "{scoreSentence} With only {BestLabel} tracked, it finished at {bestAbs1} strokes lost{evidence}.",
    "{scoreSentence} One area was tracked, {BestLabel}, and it gave away {bestAbs1} strokes{evidence}.",
    "{scoreSentence} Only {BestLabel} was measured, and it lost {bestAbs1} strokes{evidence}.",
    "{scoreSentence} {BestLabel} was the only tracked area, and it cost {bestAbs1} strokes{evidence}.",
    "{scoreSentence} Only {BestLabel} was tracked, finishing {bestAbs1} strokes behind expectation{evidence}.",
    "{scoreSentence} With {BestLabel} as the only tracked area, the measured loss was {bestAbs1} strokes{evidence}.",
    "{scoreSentence} Only {BestLabel} was logged in detail, and it dropped {bestAbs1} strokes{evidence}.",
    "{scoreSentence} The one tracked area, {BestLabel}, gave back {bestAbs1} strokes{evidence}.",
    "{scoreSentence} Only {BestLabel} was tracked, and it accounted for {bestAbs1} strokes lost{evidence}.",
)

M1_C_VARIANTS = (
    "{scoreSentence} {BestLabel} was the clearest bright spot, gaining {bestAbs1} strokes{evidence}.",
    "{scoreSentence} Your best measured work came from {BestLabel}, gaining {bestAbs1} strokes{evidence}.",
    "{scoreSentence} {BestLabel} carried this round, gaining {bestAbs1} strokes{evidence}.",
    "{scoreSentence} {BestLabel} gave you the biggest boost, gaining {bestAbs1} strokes{evidence}.",
    "{scoreSentence} The largest gain came from {BestLabel} at {bestAbs1} strokes{evidence}.",
    "{scoreSentence} {BestLabel} was the strongest measured area, picking up {bestAbs1} strokes{evidence}.",
    "{scoreSentence} {BestLabel} led the way, gaining {bestAbs1} strokes{evidence}.",
    "{scoreSentence} {BestLabel} did the heavy lifting with {bestAbs1} strokes gained{evidence}.",
    "{scoreSentence} The standout was {BestLabel}, which gained {bestAbs1} strokes{evidence}.",
    "{scoreSentence} {BestLabel} saved you {bestAbs1} strokes{evidence}, the most of any tracked area.",
)

M1_SINGLE_C_VARIANTS = (
    "{scoreSentence} Only {BestLabel} was tracked, and it gained {bestAbs1} strokes{evidence}.",
    "{scoreSentence} With only {BestLabel} tracked, it added {bestAbs1} strokes{evidence}.",
    "{scoreSentence} One area was tracked, {BestLabel}, and it gained {bestAbs1} strokes{evidence}.",
    "{scoreSentence} Only {BestLabel} was measured, and it picked up {bestAbs1} strokes{evidence}.",
    "{scoreSentence} {BestLabel} was the only tracked area, and it gained {bestAbs1} strokes{evidence}.",
    "{scoreSentence} Only {BestLabel} was tracked, finishing {bestAbs1} strokes ahead of expectation{evidence}.",
    "{scoreSentence} With {BestLabel} as the only tracked area, the measured gain was {bestAbs1} strokes{evidence}.",
    "{scoreSentence} Only {BestLabel} was logged in detail, and it saved {bestAbs1} strokes{evidence}.",
    "{scoreSentence} The one tracked area, {BestLabel}, gained {bestAbs1} strokes{evidence}.",
    "{scoreSentence} Only {BestLabel} was tracked, and it was a clear plus at {bestAbs1} strokes gained{evidence}.",
)

M1_C_PENALTIES_VARIANTS = (
    "{scoreSentence} Penalties stayed under control and saved {bestAbs1} strokes{evidence}.",
    "{scoreSentence} Penalties stayed limited and saved {bestAbs1} strokes{evidence}.",
    "{scoreSentence} You kept extra shots off the card, with penalties saving {bestAbs1} strokes{evidence}.",
    "{scoreSentence} Penalties were a bright spot at {bestAbs1} strokes saved{evidence}.",
    "{scoreSentence} Clean risk control led the round, with penalties gaining {bestAbs1} strokes{evidence}.",
    "{scoreSentence} Avoiding penalties was your best measured result, worth {bestAbs1} strokes{evidence}.",
    "{scoreSentence} Penalties gained {bestAbs1} strokes{evidence}, the best of the tracked areas.",
    "{scoreSentence} Staying out of trouble paid off, with penalties gaining {bestAbs1} strokes{evidence}.",
    "{scoreSentence} Penalties were the standout at {bestAbs1} strokes gained{evidence}.",
    "{scoreSentence} Keeping the ball in play saved {bestAbs1} strokes on penalties{evidence}.",
)

M1_D_VARIANTS = (
    "{scoreSentence} {BestLabel} was your strongest measured area at {bestSigned1} strokes{evidence}, close to even.",
    "{scoreSentence} {BestLabel} finished near neutral at {bestSigned1} strokes{evidence}.",
    "{scoreSentence} {BestLabel} was basically even at {bestSigned1} strokes{evidence}, holding steady.",
    "{scoreSentence} {BestLabel} stayed around even at {bestSigned1} strokes{evidence}.",
    "{scoreSentence} {BestLabel} led the tracked areas at {bestSigned1} strokes{evidence}, right around expectation.",
    "{scoreSentence} {BestLabel} finished near flat at {bestSigned1} strokes{evidence}.",
    "{scoreSentence} No tracked area pulled away, and {BestLabel} led at {bestSigned1} strokes{evidence}.",
    "{scoreSentence} {BestLabel} came in at {bestSigned1} strokes{evidence}, the best of a level set of tracked areas.",
    "{scoreSentence} {BestLabel} held near even at {bestSigned1} strokes{evidence}, which is a solid baseline.",
    "{scoreSentence} The top tracked area was {BestLabel} at {bestSigned1} strokes{evidence}, close to expectation.",
)

M1_SINGLE_D_VARIANTS = (
    "{scoreSentence} Only {BestLabel} was tracked, and it finished near even at {bestSigned1} strokes{evidence}.",
    "{scoreSentence} With only {BestLabel} tracked, it came in basically flat at {bestSigned1} strokes{evidence}.",
    "{scoreSentence} One area was tracked, {BestLabel}, at {bestSigned1} strokes{evidence}, right around neutral.",
    "{scoreSentence} Only {BestLabel} was measured, finishing at {bestSigned1} strokes{evidence}.",
    "{scoreSentence} {BestLabel} was the only tracked area and held near even at {bestSigned1} strokes{evidence}.",
    "{scoreSentence} Only {BestLabel} was tracked, landing close to expectation at {bestSigned1} strokes{evidence}.",
    "{scoreSentence} With {BestLabel} as the only tracked area, the result was near even at {bestSigned1} strokes{evidence}.",
    "{scoreSentence} Only {BestLabel} was logged in detail, and it stayed level at {bestSigned1} strokes{evidence}.",
    "{scoreSentence} The one tracked area, {BestLabel}, finished at {bestSigned1} strokes{evidence}.",
    "{scoreSentence} Only {BestLabel} was tracked, and it was steady at {bestSigned1} strokes{evidence}.",
)

# Untracked swing outweighs the measured areas: name the best area without
# pinning the round on it.
M1_D_AMBIGUOUS_VARIANTS = (
    "{scoreSentence} {BestLabel} led the tracked areas at {bestSigned1} strokes{evidence}, but most of the swing came from shots outside the tracked stats.",
    "{scoreSentence} Most of this round was decided outside the tracked stats, with {BestLabel} leading the measured areas at {bestSigned1} strokes{evidence}.",
    "{scoreSentence} {BestLabel} finished at {bestSigned1} strokes{evidence}, yet untracked shots moved the score more than any measured area.",
    "{scoreSentence} The tracked stats tell only part of the story, and {BestLabel} led them at {bestSigned1} strokes{evidence}.",
    "{scoreSentence} {BestLabel} came in at {bestSigned1} strokes{evidence}, while the bigger swing sat outside what was tracked.",
    "{scoreSentence} Untracked shots drove most of the result, and {BestLabel} was the best measured area at {bestSigned1} strokes{evidence}.",
    "{scoreSentence} {BestLabel} was the top tracked area at {bestSigned1} strokes{evidence}, though the tracked stats explain a small share of the score.",
    "{scoreSentence} Shots outside the tracked stats shaped this round most, with {BestLabel} at {bestSigned1} strokes{evidence}.",
    "{scoreSentence} {BestLabel} finished at {bestSigned1} strokes{evidence}, and the larger movement came from parts of the round that were not tracked.",
    "{scoreSentence} The measured areas stayed in the background, with {BestLabel} on top at {bestSigned1} strokes{evidence}.",
)

# Residual-dominant with a single tracked area: there is nothing to rank it against
M1_SINGLE_D_AMBIGUOUS_VARIANTS = (
    "{scoreSentence} Only {BestLabel} was tracked, at {bestSigned1} strokes{evidence}, and most of the swing came from shots outside it.",
    "{scoreSentence} {BestLabel} was the one tracked area at {bestSigned1} strokes{evidence}, but untracked shots moved the score more.",
    "{scoreSentence} With only {BestLabel} tracked, at {bestSigned1} strokes{evidence}, most of this round was decided elsewhere.",
    "{scoreSentence} Only {BestLabel} was measured, finishing at {bestSigned1} strokes{evidence}, while the bigger swing went untracked.",
    "{scoreSentence} {BestLabel} came in at {bestSigned1} strokes{evidence} as the only tracked area, and it explains a small share of the score.",
    "{scoreSentence} The one tracked area, {BestLabel}, landed at {bestSigned1} strokes{evidence}, yet untracked shots drove most of the result.",
    "{scoreSentence} Only {BestLabel} was logged in detail, at {bestSigned1} strokes{evidence}, and the larger movement sat outside it.",
    "{scoreSentence} {BestLabel} was tracked on its own at {bestSigned1} strokes{evidence}, while parts of the round that were not tracked shaped it most.",
    "{scoreSentence} With {BestLabel} as the only tracked area, at {bestSigned1} strokes{evidence}, the rest of the swing stayed off the card.",
    "{scoreSentence} Only {BestLabel} was tracked, finishing at {bestSigned1} strokes{evidence}, and shots outside it decided more of the score.",
)

# ================================================================
# Message 2: scoring implication
# ================================================================

M2_A_BETTER_VARIANTS = (
    "That is a strong score for you, well under your recent average.",
    "This round came in meaningfully lower than your recent average.",
    "Scoring improved clearly against your recent rounds.",
    "This was a clear step forward compared to your recent scoring.",
    "You finished below your recent average, a strong result.",
    "This round beat your recent scoring level by a clear margin.",
    "That score sits well under your recent trend.",
    "You outperformed your recent scoring baseline.",
    "This is one of your better scores against your recent average.",
    "The score came in clearly better than your recent pattern.",
)

M2_A_NEAR_VARIANTS = (
    "This landed close to your recent average.",
    "This result sits within your normal scoring range.",
    "Scoring held steady against your recent average.",
    "This round tracked closely with your recent scoring.",
    "You landed within your typical scoring window.",
    "This score is in line with your recent trend.",
    "The score came in right around your recent average.",
    "You finished in line with your recent scoring baseline.",
    "This was a typical score compared to your recent rounds.",
    "The total sits near your recent scoring level.",
)

M2_A_WORSE_VARIANTS = (
    "This finished higher than your recent average.",
    "This round came in above your recent scoring level.",
    "Scoring slipped against your recent pattern.",
    "This result moved outside your typical range on the high side.",
    "You gave back ground compared to your recent baseline.",
    "This score sits above your recent trend.",
    "The total came in higher than your recent rounds.",
    "This was a higher score than you have been posting lately.",
    "Scoring ran above your recent average this time.",
    "The score finished on the high side of your recent range.",
)

M2_A_NO_BASELINE_VARIANTS = (
    "There is no recent average yet to compare this score against.",
    "A scoring baseline is still building, so this score stands on its own for now.",
    "Without a recent average to compare, this score becomes part of your baseline.",
    "This score helps set the recent average future rounds are measured against.",
    "No recent average is available yet, so the comparison starts with rounds like this one.",
    "Your recent average is not set yet, and this round adds to it.",
    "There are not enough recent rounds to compare this score with.",
    "This score goes into the baseline that later rounds will be judged against.",
    "Until a recent average exists, each score is a reference point like this one.",
    "A recent average is not available yet, so there is no comparison for this score.",
)

M2_A_SCORE_ONLY_CAVEATS = (
    "Because the round was logged as score only, what drove it is not visible.",
    "With score-only logging, the result cannot be tied to one part of the game.",
    "Since only score was recorded, the main driver cannot be isolated.",
    "Without advanced stats, the breakdown behind the score is not available.",
    "With only the total logged, there is no way to rank what mattered most.",
    "No tracked areas means the reason behind the score stays open.",
    "Score-only rounds do not show where strokes were won or lost.",
    "Because no stats were logged, the scoring story stays broad.",
    "Without fairways, greens, putts, or penalties, the cause cannot be narrowed down.",
    "With just a score, the split between strengths and leaks is not visible.",
)

M2_A_SINGLE_CAVEATS = (
    "Only one area was tracked, so there is not enough to compare areas and name a clear focus.",
    "With just one tracked stat, there is not enough context to call out the main issue.",
    "One area was logged, and picking a focus needs at least two areas to compare.",
    "Tracking one area is a good start, but it does not support a clear focus yet.",
    "With only one tracked area, there is not enough information to rank what cost the most.",
    "A single tracked area is not enough to separate what mattered most.",
    "One tracked area gives a reading, not a comparison, so no focus is named yet.",
    "Ranking areas needs at least two tracked stats, and this round had one.",
    "With one area measured, the rest of the scoring picture is still open.",
    "A second tracked area would make it possible to compare and pick a focus.",
)

M2_C_VARIANTS = (
    "{OppLabel} finished close to even at {oppSigned1} strokes.",
    "{OppLabel} came in near neutral at {oppSigned1} strokes.",
    "{OppLabel} was basically flat at {oppSigned1} strokes.",
    "{OppLabel} held steady at {oppSigned1} strokes.",
    "{OppLabel} stayed around even at {oppSigned1} strokes.",
    "{OppLabel} landed near even at {oppSigned1} strokes.",
    "Even the lowest tracked area, {OppLabel}, stayed close to even at {oppSigned1} strokes.",
    "{OppLabel} was the lowest tracked area and still near neutral at {oppSigned1} strokes.",
    "No tracked area lost much, with {OppLabel} lowest at {oppSigned1} strokes.",
    "{OppLabel} finished level at {oppSigned1} strokes, so no measured area cost you much.",
)

M2_D_VARIANTS = (
    "{OppLabel} cost the most at {oppAbs1} strokes{evidence}.",
    "{OppLabel} was where the most strokes were lost, {oppAbs1} in total{evidence}.",
    "{OppLabel} accounted for the largest loss at {oppAbs1} strokes{evidence}.",
    "{OppLabel} was the clearest place to tighten up at {oppAbs1} strokes lost{evidence}.",
    "{OppLabel} drove the biggest loss at {oppAbs1} strokes{evidence}.",
    "The biggest measured leak was {OppLabel} at {oppAbs1} strokes{evidence}.",
    "{OppLabel} gave back the most, losing {oppAbs1} strokes{evidence}.",
    "Most of the measured damage came from {OppLabel} at {oppAbs1} strokes{evidence}.",
    "{OppLabel} was the costliest tracked area at {oppAbs1} strokes{evidence}.",
    "{OppLabel} lost {oppAbs1} strokes{evidence}, more than any other tracked area.",
)

M2_D_PENALTIES_VARIANTS = (
    "Penalties cost the most at {oppAbs1} strokes{evidence}.",
    "Penalty shots accounted for the largest loss at {oppAbs1} strokes{evidence}.",
    "Penalties were the clearest place to tighten up at {oppAbs1} strokes lost{evidence}.",
    "Penalties drove the biggest loss at {oppAbs1} strokes{evidence}.",
    "The biggest measured leak was penalties at {oppAbs1} strokes{evidence}.",
    "Penalty strokes gave back the most, costing {oppAbs1} strokes{evidence}.",
    "Most of the measured damage came from penalties at {oppAbs1} strokes{evidence}.",
    "Penalties were the costliest tracked area at {oppAbs1} strokes{evidence}.",
    "Penalties lost {oppAbs1} strokes{evidence}, more than any other tracked area.",
    "Trouble shots added up, with penalties costing {oppAbs1} strokes{evidence}.",
)

M2_E_FOLLOW_UP = "If that holds, scoring stays steadier."

M2_E_VARIANTS = (
    "{OppLabel} still finished as a net positive at {oppAbs1} strokes. {followUp}",
    "{OppLabel} stayed positive at {oppAbs1} strokes gained. {followUp}",
    "Even your lowest tracked area, {OppLabel}, was a net positive at {oppAbs1} strokes. {followUp}",
    "{OppLabel} remained a net positive at {oppAbs1} strokes. {followUp}",
    "Every tracked area gained strokes, with {OppLabel} lowest at {oppAbs1}. {followUp}",
    "{OppLabel} held up as a net positive at {oppAbs1} strokes. {followUp}",
    "No tracked area lost strokes, and {OppLabel} trailed the rest at {oppAbs1} gained. {followUp}",
    "{OppLabel} was still net positive at {oppAbs1} strokes. {followUp}",
    "{OppLabel} finished in the plus column at {oppAbs1} strokes. {followUp}",
    "All tracked areas were net positive, {OppLabel} included at {oppAbs1} strokes. {followUp}",
)

M2_E_PENALTIES_VARIANTS = (
    "Penalties remained a net positive at {oppAbs1} strokes. Risk control held up.",
    "Penalties stayed positive at {oppAbs1} strokes. That kept extra shots off the card.",
    "Penalties finished as a net positive at {oppAbs1} strokes. Controlled misses paid off.",
    "Penalties still gained {oppAbs1} strokes. Staying out of trouble held up.",
    "Penalties ended as a net positive at {oppAbs1} strokes. Risk control stayed solid.",
    "Even penalties, your lowest tracked area, gained {oppAbs1} strokes. The card stayed clean.",
    "Penalties were net positive at {oppAbs1} strokes. Safe misses kept the round moving.",
    "Penalties added {oppAbs1} strokes of value. Trouble stayed out of play.",
    "Penalties finished {oppAbs1} strokes to the good. Conservative lines worked.",
    "Penalties came out ahead by {oppAbs1} strokes. Good targets kept doubles away.",
)

RESIDUAL_POSITIVE_VARIANTS = (
    "There was {residualSigned1} strokes of swing from areas that were not tracked this round.",
    "About {residualSigned1} strokes came from parts of the round outside the tracked stats.",
    "Untracked shots accounted for {residualSigned1} strokes.",
    "Some of the scoring swing, {residualSigned1} strokes, came from areas not tracked here.",
    "The tracked stats explain part of the round, and {residualSigned1} strokes came from outside them.",
    "Shots outside the tracked stats added {residualSigned1} strokes.",
    "Another {residualSigned1} strokes were gained in parts of the round that were not tracked.",
    "Untracked parts of the round were worth {residualSigned1} strokes.",
    "Beyond the tracked stats, {residualSigned1} strokes were gained elsewhere.",
    "Areas without tracking contributed {residualSigned1} strokes.",
)

# Filled with the absolute value: every phrasing already says the strokes were lost
RESIDUAL_NEGATIVE_VARIANTS = (
    "There was {residualAbs1} strokes of loss from areas that were not tracked this round.",
    "About {residualAbs1} strokes of loss came from parts of the round outside the tracked stats.",
    "Untracked shots cost {residualAbs1} strokes.",
    "Some of the strokes lost, {residualAbs1}, came from areas not tracked here.",
    "The tracked stats explain part of the round, and {residualAbs1} more strokes were dropped outside them.",
    "Shots outside the tracked stats cost {residualAbs1} strokes.",
    "Another {residualAbs1} strokes were lost in parts of the round that were not tracked.",
    "Untracked parts of the round cost {residualAbs1} strokes.",
    "Beyond the tracked stats, {residualAbs1} strokes were lost elsewhere.",
    "Areas without tracking gave away {residualAbs1} strokes.",
)

# ================================================================
# Message 3: next round action
# ================================================================

TRACKING_CLAUSE_VARIANTS = (
    "Track {missingList} so the next breakdown shows what helped and what hurt.",
    "To get clearer feedback, track {missingList}.",
    "Add {missingList} so we can see where shots were won or lost.",
    "Log {missingList} so strengths and leaks show up in the right place.",
    "For a clearer breakdown, track {missingList}.",
    "Add {missingList} so each part of the game shows up on its own.",
    "Track {missingList} to cut guesswork and sharpen the takeaways.",
    "Log {missingList} so your next focus is backed by real round detail.",
    "To see where strokes are coming from, track {missingList}.",
    "Keep tracking consistent and add {missingList}.",
)

GENERIC_ACTION_VARIANTS = (
    "Play to the widest target available and commit to that start line without steering.",
    "Choose the line that keeps your common miss playable, even if it leaves a longer approach.",
    "When trouble is in play, shift your target far enough to remove it from your miss pattern.",
    "Before every full swing, identify the safe side and commit to that line.",
    "Treat each hole as a two-shot plan: first keep it in play, then attack from position.",
    "When unsure, aim to the center of the fairway or green and accept the longer putt.",
    "If a shot feels tight, widen your target until a miss still leaves a playable next shot.",
    "Pick the target that removes penalty first, then swing with commitment.",
    "Favor position over distance when the landing area narrows.",
    "Make your decision early, pick a specific start line, and swing without second guessing.",
)

OFF_TEE_ACTION_VARIANTS = (
    "Pick a start line that keeps your common miss in play and commit to that shape.",
    "On tight holes, choose the club that keeps trouble out of play.",
    "Aim away from penalty and accept a longer approach to protect the card.",
    "When the landing zone is narrow, prioritize fairway or first cut over maximum distance.",
    "Set a conservative target off the tee and swing to it without steering mid-swing.",
    "If a miss off the tee brings penalty, take the safe side and keep the next shot playable.",
    "When driver brings the worst outcome into play, choose the club that keeps the hole simple.",
    "Make staying in play the only tee-shot goal, and let distance come second.",
    "On pressure tee shots, widen the target and commit to a confident swing, not a perfect one.",
    "Favor the side that removes trouble, even if it means one club less off the tee.",
)

APPROACH_ACTION_VARIANTS = (
    "Default to a center-green target unless the flag is clearly safe for your dispersion.",
    "When the pin is protected, play to the fat side and take two-putt pars.",
    "Choose the club that covers the front and holds the middle instead of chasing a perfect number.",
    "If missing short brings trouble, take one more club and make a smooth swing.",
    "Aim approaches at the widest landing area and accept longer birdie putts.",
    "Play approaches to the safe half and keep misses on the green or fringe.",
    "When in doubt, pick the middle of the green and trust that 25 feet is still a good look.",
    "Avoid short-siding by favoring targets that leave an uphill chip or a long putt, not a recovery shot.",
    "If the flag is tucked, aim for the center and let a good swing earn the closer look.",
    "Pick a conservative approach target, commit to your stock flight, and accept the result.",
)

PUTTING_ACTION_VARIANTS = (
    "Run a lag-putting drill before you tee off, then make speed the priority on every long putt so it finishes inside three feet.",
    "On lag putts, pick a leave zone and roll pace to that window instead of chasing a perfect line.",
    "On putts outside 15 feet, commit to lag speed that finishes hole-high with a short second putt.",
    "On downhill putts, let the pace die at the hole so the comeback stays manageable.",
    "Warm up with long lag putts and carry that pace control into the round.",
    "On mid-range putts, choose a start line and match speed to it without steering.",
    "Treat every long putt as a lag, leaving yourself a simple second putt.",
    "When the read is unclear, pick the simplest line and focus on lag pace that leaves a tap-in.",
    "On slippery putts, favor dying speed so the comeback putt stays short.",
    "Commit to your read, then roll it with lag pace you can repeat instead of guiding it at the hole.",
)

PENALTIES_ACTION_VARIANTS = (
    "When penalty is in play, aim to remove it from your miss and accept the longer next shot.",
    "If you are out of position, take the punch-out that guarantees a clean next swing.",
    "On penalty-lined holes, pick the club and target that keep your biggest miss short of trouble.",
    "Before each full shot, identify the penalty side and choose a target that takes it out of play.",
    "Choose conservative lines past trouble and protect the card from doubles.",
    "When the shot window is tight, take the safe side or the lay-up and keep the ball in play.",
    "If a miss brings penalty, play for the safe miss so one swing does not turn into two shots of damage.",
    "When trouble is on both sides, pick the side that still leaves a playable next shot on a miss.",
    "Use one rule on every tee: no extra distance is worth a penalty stroke.",
    "When you are tempted to force a line, step back and choose the option that avoids penalty first.",
)

AREA_ACTION_VARIANTS = {
    "off_tee": OFF_TEE_ACTION_VARIANTS,
    "approach": APPROACH_ACTION_VARIANTS,
    "putting": PUTTING_ACTION_VARIANTS,
    "penalties": PENALTIES_ACTION_VARIANTS,
}

# ================================================================
# Onboarding (fixed copy, one entry per outcome)
# ================================================================

ONBOARDING_FIRST_ROUND = (
    "You shot {scoreLine} in your first logged round. Nice start.",
    "Post-round insights get more specific once there is a small history to compare against.",
    "Next round: Keep logging your score, and track fairways, greens, putts, and penalties if you can. Two more rounds unlock full post-round insights.",
)

ONBOARDING_SECOND_ROUND = {
    "better": "Round 2 logged: {scoreLine}, better than your first round by {delta} {strokeWord}.",
    "same": "Round 2 logged: {scoreLine}, matching your first round.",
    "worse": "Round 2 logged: {scoreLine}, {delta} {strokeWord} higher than your first round.",
}

ONBOARDING_SECOND_ROUND_FOLLOW = {
    "better": "Good signal to build on. Your early trend comes into focus after one more round.",
    "same": "That consistency is useful. Your early trend comes into focus after one more round.",
    "worse": "Totally normal early on. Your early trend comes into focus after one more round.",
}

ONBOARDING_SECOND_ROUND_NEXT = (
    "Next round: Log your score again, and track fairways, greens, putts, and penalties if you can. "
    "One more round unlocks full post-round insights."
)

ONBOARDING_THIRD_ROUND = {
    "better": "Round 3 logged: {scoreLine}, better than last round by {delta} {strokeWord}.",
    "same": "Round 3 logged: {scoreLine}, matching last round.",
    "worse": "Round 3 logged: {scoreLine}, {delta} {strokeWord} higher than last round.",
}

ONBOARDING_THIRD_ROUND_FOLLOW = (
    "You now have enough rounds for trend-based feedback, and the breakdown gets more reliable as you keep logging."
)

ONBOARDING_THIRD_ROUND_NEXT = (
    "Next round: Full post-round insights start with your next round. "
    "Keep tracking fairways, greens, putts, and penalties so they are as sharp as possible."
)
