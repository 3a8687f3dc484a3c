"""
Scenes - The narrative content graph for arc 1.

Scene structure:
- Start scenes (phase START) open a run and live outside the deck
- Deck scenes are bucketed by min_stage and paced by phase
- vector marks the path a scene leans to; "neutral" scenes suit any path
- Choices carry effort (fatigue) and path (affinity) tags
- Everyday errands (errands.py) join the registry here, spread across all paths
"""

from ..engine_core.content import NEUTRAL_VECTOR, Choice, Effort, Path, Scene, ScenePhase
from ..engine_core.stats import Effects, Season, Stage
from .errands import ERRANDS

MIN_HEALTH_FOR_FAMILY = 8
MIN_HEALTH_FOR_COMBAT = 6


def _walk_away(choice_id: str = "move-on", text: str = "You keep your head down and move on.") -> Choice:
    """Riskless choice with identical outcomes."""
    return Choice(
        id=choice_id,
        label="Move on",
        description="Nothing gained, nothing lost.",
        base_chance=1.0,
        success_text=text,
        fail_text=text,
        effort=Effort.REST,
    )


# ============================================================================
# Start scenes
# ============================================================================

CITY_GATE = Scene(
    id="city-gate",
    title="At the City Gate",
    text="You arrive at the town gate with a bundle on your back and a few coins in your purse.",
    phase=ScenePhase.START,
    choices=(
        Choice(
            id="ask-for-work",
            label="Ask the guards about work",
            description="They know who is hiring.",
            base_chance=0.7,
            success_text="A guard points you to a foreman by the river.",
            fail_text="The guards laugh you off.",
            success=Effects(reputation=1),
            fail=Effects(reputation=-1),
            effort=Effort.SOCIAL,
            path=Path.SERVICE,
        ),
        Choice(
            id="find-lodging",
            label="Find cheap lodging",
            description="A roof first, plans later.",
            base_chance=0.8,
            success_text="You find a straw bed in a quiet loft.",
            fail_text="The innkeeper overcharges you.",
            success=Effects(health=1),
            fail=Effects(money=-1),
            effort=Effort.REST,
        ),
        Choice(
            id="sell-trinket",
            label="Sell a trinket",
            description="Turn the last keepsake into coin.",
            base_chance=0.6,
            success_text="A trader pays fairly for it.",
            fail_text="You get a pittance.",
            success=Effects(money=2),
            fail=Effects(money=1),
            effort=Effort.SOCIAL,
            path=Path.TRADE,
        ),
    ),
)

ORPHAN_ALLEY = Scene(
    id="orphan-alley",
    title="The Back Alley",
    text="Another morning in the alley where you grew up. The bakery vents smell of fresh bread.",
    phase=ScenePhase.START,
    for_character=("urchin",),
    choices=(
        Choice(
            id="steal-bread",
            label="Snatch a loaf",
            description="Quick hands, empty stomach.",
            base_chance=0.6,
            success_text="You vanish into the crowd with a warm loaf.",
            fail_text="The baker catches you by the collar.",
            success=Effects(health=1, karma=-1),
            fail=Effects(reputation=-1, health=-1),
            effort=Effort.PHYSICAL,
            path=Path.CRIME,
        ),
        Choice(
            id="sweep-stalls",
            label="Offer to sweep the stalls",
            description="Honest work for scraps.",
            base_chance=0.75,
            success_text="The baker pays you in coin and crusts.",
            fail_text="Nobody needs a sweeper today.",
            success=Effects(money=1, reputation=1),
            effort=Effort.PHYSICAL,
            path=Path.SERVICE,
        ),
    ),
)

MASTERS_WORKSHOP = Scene(
    id="masters-workshop",
    title="The Master's Workshop",
    text="Your master has gone to market and left you in charge of the workshop.",
    phase=ScenePhase.START,
    for_character=("apprentice",),
    choices=(
        Choice(
            id="finish-order",
            label="Finish the pending order",
            description="Prove yourself.",
            base_chance=0.65,
            success_text="The customer praises the work.",
            fail_text="You ruin a piece of good timber.",
            success=Effects(skill=1, money=1),
            fail=Effects(money=-1),
            effort=Effort.MENTAL,
            path=Path.CRAFT,
        ),
        Choice(
            id="nap-in-back",
            label="Nap in the back room",
            description="The master will not know.",
            base_chance=1.0,
            success_text="You wake rested.",
            fail_text="You wake rested.",
            success=Effects(health=1),
            fail=Effects(health=1),
            effort=Effort.REST,
        ),
    ),
)

REFUGEE_CAMP = Scene(
    id="refugee-camp",
    title="The Refugee Camp",
    text="Tents crowd the muddy field outside the walls. Rain drips through the canvas.",
    phase=ScenePhase.START,
    for_character=("refugee",),
    choices=(
        Choice(
            id="haul-water",
            label="Haul water for the camp",
            description="Hard, thankless, necessary.",
            base_chance=0.8,
            success_text="The camp elders remember your help.",
            fail_text="You slip in the mud and spill it all.",
            success=Effects(reputation=1, karma=1),
            fail=Effects(health=-1),
            effort=Effort.PHYSICAL,
            path=Path.SERVICE,
        ),
        Choice(
            id="trade-rations",
            label="Trade spare rations",
            description="Someone always needs something.",
            base_chance=0.55,
            success_text="You turn rations into coin.",
            fail_text="Nobody has coin to spare.",
            success=Effects(money=2),
            fail=Effects(health=-1),
            effort=Effort.SOCIAL,
            path=Path.TRADE,
        ),
    ),
)

VILLAGE_FIELD = Scene(
    id="village-field",
    title="Leaving the Village",
    text="You look back over the field you worked since childhood before setting out for town.",
    phase=ScenePhase.START,
    for_character=("farmer",),
    choices=(
        Choice(
            id="last-harvest",
            label="Help with one last harvest",
            description="A final wage before the road.",
            base_chance=0.75,
            success_text="Your neighbours send you off with coin.",
            fail_text="Your back gives out halfway down the row.",
            success=Effects(money=2),
            fail=Effects(health=-1),
            effort=Effort.PHYSICAL,
            path=Path.CRAFT,
        ),
        Choice(
            id="leave-at-dawn",
            label="Leave at dawn",
            description="No goodbyes.",
            base_chance=1.0,
            success_text="The road is quiet and cool.",
            fail_text="The road is quiet and cool.",
            effort=Effort.REST,
        ),
    ),
)


# ============================================================================
# Early tier (untiered)
# ============================================================================

DOCKWORK = Scene(
    id="dockwork",
    title="Work on the River Docks",
    text="A foreman offers a day of heavy hauling.",
    phase=ScenePhase.EARLY,
    vector=Path.SERVICE,
    choices=(
        Choice(
            id="take-shift",
            label="Take the shift",
            description="Steady pay, risk of exhaustion.",
            base_chance=0.85,
            success_text="You finish the shift and collect your pay.",
            fail_text="Overworked, you collapse before the end.",
            success=Effects(money=3, skill=1),
            fail=Effects(health=-2, reputation=-1),
            effort=Effort.PHYSICAL,
            path=Path.SERVICE,
        ),
        Choice(
            id="demand-more",
            label="Demand higher pay",
            description="Could raise your standing or sour the foreman.",
            base_chance=0.35,
            success_text="The foreman agrees. You look bold.",
            fail_text="He laughs and sends you away.",
            success=Effects(money=5, reputation=2),
            fail=Effects(reputation=-1),
            effort=Effort.SOCIAL,
            path=Path.TRADE,
        ),
        Choice(
            id="ask-apprentice",
            label="Ask to learn the rigging",
            description="Skill now, coin later.",
            base_chance=0.6,
            success_text="An old rigger shows you the knots.",
            fail_text="Nobody has time to teach you.",
            success=Effects(skill=2, reputation=1, money=-1),
            fail=Effects(reputation=-1),
            effort=Effort.MENTAL,
            path=Path.CRAFT,
        ),
        Choice(
            id="rest-day",
            label="Rest instead",
            description="Recover your strength.",
            base_chance=1.0,
            success_text="You spend the day resting.",
            fail_text="You spend the day resting.",
            success=Effects(health=2),
            fail=Effects(health=2),
            effort=Effort.REST,
        ),
    ),
)

ALLEY_FAVOR = Scene(
    id="alley-favor",
    title="A Shady Favor",
    text="A hooded man offers coin to carry a package across town, no questions asked.",
    phase=ScenePhase.EARLY,
    vector=Path.CRIME,
    choices=(
        Choice(
            id="carry-package",
            label="Carry the package",
            description="Good coin, bad company.",
            base_chance=0.55,
            success_text="You deliver it and get paid.",
            fail_text="The watch stops you. You barely slip away.",
            success=Effects(money=6, reputation=-1, karma=-1),
            fail=Effects(reputation=-2, health=-1),
            effort=Effort.PHYSICAL,
            path=Path.CRIME,
        ),
        Choice(
            id="refuse",
            label="Refuse",
            description="Keep your hands clean.",
            base_chance=1.0,
            success_text="You walk away with your conscience intact.",
            fail_text="You walk away with your conscience intact.",
            success=Effects(reputation=1),
            fail=Effects(reputation=1),
            effort=Effort.SOCIAL,
        ),
        Choice(
            id="negotiate",
            label="Negotiate a bigger cut",
            description="Greed has a price.",
            base_chance=0.4,
            success_text="He pays double to be rid of the haggling.",
            fail_text="He finds someone less greedy.",
            success=Effects(money=8, reputation=-1, karma=-1),
            fail=Effects(reputation=-2),
            effort=Effort.SOCIAL,
            path=Path.CRIME,
        ),
        Choice(
            id="tip-guards",
            label="Tip off the guards",
            description="Dangerous, but honest.",
            base_chance=0.35,
            success_text="The guards thank you publicly.",
            fail_text="His friends find you first.",
            success=Effects(reputation=3, karma=1),
            fail=Effects(health=-2, money=-1),
            effort=Effort.SOCIAL,
            path=Path.SERVICE,
        ),
    ),
)

TRAINING_YARD = Scene(
    id="training-yard",
    title="The Training Yard",
    text="Militia recruits drill in the yard behind the barracks.",
    phase=ScenePhase.EARLY,
    vector=Path.SERVICE,
    choices=(
        Choice(
            id="train",
            label="Train with the recruits",
            description="Sweat for skill.",
            base_chance=0.7,
            success_text="The sergeant nods at your form.",
            fail_text="You trip over your own feet.",
            success=Effects(skill=2, reputation=1),
            fail=Effects(reputation=-1),
            effort=Effort.PHYSICAL,
            path=Path.SERVICE,
        ),
        Choice(
            id="sparring",
            label="Spar with a veteran",
            description="Painful lessons stick.",
            base_chance=0.45,
            success_text="You hold your own. The yard cheers.",
            fail_text="You are carried off the field.",
            success=Effects(skill=3, reputation=2),
            fail=Effects(health=-3),
            min_health=MIN_HEALTH_FOR_COMBAT,
            effort=Effort.PHYSICAL,
            path=Path.SERVICE,
        ),
        Choice(
            id="errands",
            label="Run errands for the quartermaster",
            description="Small coin, little risk.",
            base_chance=0.8,
            success_text="The quartermaster pays you.",
            fail_text="He forgets to pay you.",
            success=Effects(money=2),
            effort=Effort.SOCIAL,
            path=Path.SERVICE,
        ),
        _walk_away("skip-train", "You watch from the fence and catch your breath."),
    ),
)

TAVERN_NIGHT = Scene(
    id="tavern-night",
    title="A Night at the Tavern",
    text="The tavern is loud and warm, and every table has a story.",
    phase=ScenePhase.EARLY,
    vector=NEUTRAL_VECTOR,
    choices=(
        Choice(
            id="listen-rumors",
            label="Listen to rumors",
            description="Knowledge is cheap here.",
            base_chance=0.6,
            success_text="You learn who is hiring and who is hiding.",
            fail_text="Nothing but drunken boasting.",
            success=Effects(reputation=1, skill=1),
            effort=Effort.MENTAL,
        ),
        Choice(
            id="gamble-coins",
            label="Gamble at dice",
            description="Fortune favours the bold, sometimes.",
            base_chance=0.4,
            success_text="The dice love you tonight.",
            fail_text="The dice take your coin.",
            success=Effects(money=4),
            fail=Effects(money=-3),
            effort=Effort.SOCIAL,
            path=Path.CRIME,
        ),
        Choice(
            id="help-barkeep",
            label="Help the barkeep",
            description="Wash mugs for coin.",
            base_chance=0.8,
            success_text="The barkeep pays you and pours you a drink.",
            fail_text="A brawler knocks you into the bar.",
            success=Effects(money=2, reputation=1),
            fail=Effects(health=-1),
            effort=Effort.PHYSICAL,
            path=Path.SERVICE,
        ),
        Choice(
            id="avoid-trouble",
            label="Go to bed early",
            description="Stay out of trouble.",
            base_chance=1.0,
            success_text="You sleep soundly.",
            fail_text="You sleep soundly.",
            success=Effects(health=1),
            fail=Effects(health=1),
            effort=Effort.REST,
        ),
    ),
)

MONASTERY_GATES = Scene(
    id="monastery-gates",
    title="The Monastery Gates",
    text="The monks open their gates to those willing to work.",
    phase=ScenePhase.EARLY,
    vector=NEUTRAL_VECTOR,
    choices=(
        Choice(
            id="work-monastery",
            label="Work in the gardens",
            description="Honest labour, simple food.",
            base_chance=0.75,
            success_text="The brothers feed you well.",
            fail_text="You wilt in the sun.",
            success=Effects(health=2, reputation=1, karma=1),
            fail=Effects(reputation=-1),
            effort=Effort.PHYSICAL,
            path=Path.SERVICE,
        ),
        Choice(
            id="seek-education",
            label="Ask to study letters",
            description="The library is open to the patient.",
            base_chance=0.45,
            success_text="A brother teaches you to read.",
            fail_text="The abbot turns you away.",
            success=Effects(skill=2, reputation=1),
            fail=Effects(reputation=-1),
            effort=Effort.MENTAL,
            path=Path.CRAFT,
        ),
        Choice(
            id="donate",
            label="Donate a coin",
            description="Charity is its own reward.",
            base_chance=0.9,
            success_text="The monks bless you.",
            fail_text="The alms box is already locked.",
            success=Effects(reputation=2, money=-1, karma=1),
            effort=Effort.SOCIAL,
        ),
        _walk_away(),
    ),
)

TOWN_WELL = Scene(
    id="town-well",
    title="The Town Well",
    text="Washerwomen gossip around the well while children chase pigeons.",
    phase=ScenePhase.EARLY,
    vector=NEUTRAL_VECTOR,
    choices=(
        Choice(
            id="carry-buckets",
            label="Carry buckets for coin",
            description="Backbreaking but paid.",
            base_chance=0.8,
            success_text="Your arms ache but your purse is heavier.",
            fail_text="A bucket slips and soaks a merchant.",
            success=Effects(money=2),
            fail=Effects(reputation=-1),
            effort=Effort.PHYSICAL,
            path=Path.SERVICE,
        ),
        Choice(
            id="gossip",
            label="Join the gossip",
            description="Names, debts, feuds.",
            base_chance=0.65,
            success_text="You learn who owes whom.",
            fail_text="They fall silent when you approach.",
            success=Effects(reputation=1),
            effort=Effort.SOCIAL,
            path=Path.TRADE,
        ),
        _walk_away(),
    ),
)

RIVER_FISHING = Scene(
    id="river-fishing",
    title="Fishing by the River",
    text="The river runs high and the fish are biting under the willows.",
    phase=ScenePhase.EARLY,
    vector=Path.CRAFT,
    seasons=(Season.SPRING, Season.SUMMER, Season.AUTUMN),
    choices=(
        Choice(
            id="cast-net",
            label="Cast a net",
            description="Feed yourself and sell the rest.",
            base_chance=0.6,
            success_text="Your net comes up full.",
            fail_text="The net tears on a snag.",
            success=Effects(money=2, health=1),
            fail=Effects(money=-1),
            effort=Effort.PHYSICAL,
            path=Path.CRAFT,
        ),
        Choice(
            id="poach-weir",
            label="Raid the lord's weir",
            description="Bigger catch, bigger trouble.",
            base_chance=0.45,
            success_text="You haul a basket of the lord's eels.",
            fail_text="The bailiff's dogs chase you off.",
            success=Effects(money=4, karma=-1),
            fail=Effects(health=-2, reputation=-1),
            effort=Effort.PHYSICAL,
            path=Path.CRIME,
        ),
        Choice(
            id="nap-on-bank",
            label="Nap on the bank",
            description="Let the fish be.",
            base_chance=1.0,
            success_text="You doze in the shade.",
            fail_text="You doze in the shade.",
            success=Effects(health=1),
            fail=Effects(health=1),
            effort=Effort.REST,
        ),
    ),
)

SPRING_PLANTING = Scene(
    id="spring-planting",
    title="Spring Planting",
    text="Farmers outside the walls need hands for the sowing.",
    phase=ScenePhase.EARLY,
    vector=Path.CRAFT,
    seasons=(Season.SPRING,),
    choices=(
        Choice(
            id="sow-fields",
            label="Sow the fields",
            description="Long days, fair pay.",
            base_chance=0.8,
            success_text="The rows are straight and the farmer is pleased.",
            fail_text="You sow half the seed in the ditch.",
            success=Effects(money=3),
            fail=Effects(reputation=-1),
            effort=Effort.PHYSICAL,
            path=Path.CRAFT,
        ),
        Choice(
            id="sell-seed",
            label="Resell seed in town",
            description="Buy low, sell high.",
            base_chance=0.5,
            success_text="Townsfolk pay well for garden seed.",
            fail_text="The seed is mouldy.",
            success=Effects(money=3),
            fail=Effects(money=-2),
            effort=Effort.SOCIAL,
            path=Path.TRADE,
        ),
        _walk_away(),
    ),
)

SMITHY = Scene(
    id="smithy",
    title="The Smithy",
    text="Sparks fly from the anvil. The smith needs someone to work the bellows.",
    phase=ScenePhase.EARLY,
    vector=Path.CRAFT,
    choices=(
        Choice(
            id="work-bellows",
            label="Work the bellows",
            description="Hot, steady work.",
            base_chance=0.8,
            success_text="The smith shows you a trick or two.",
            fail_text="You singe your arm.",
            success=Effects(money=1, skill=1),
            fail=Effects(health=-1),
            effort=Effort.PHYSICAL,
            path=Path.CRAFT,
        ),
        Choice(
            id="forge-nails",
            label="Forge nails yourself",
            description="Ambitious for a beginner.",
            base_chance=0.45,
            success_text="Your nails are crooked but sellable.",
            fail_text="You waste good iron.",
            success=Effects(money=2, skill=2),
            fail=Effects(money=-1, reputation=-1),
            effort=Effort.MENTAL,
            path=Path.CRAFT,
        ),
        _walk_away(),
    ),
)

HERB_GATHERING = Scene(
    id="herb-gathering",
    title="Herbs in the Woods",
    text="An old herbwife pays for roots and leaves gathered in the forest.",
    phase=ScenePhase.EARLY,
    vector=Path.TRADE,
    seasons=(Season.SPRING, Season.SUMMER),
    choices=(
        Choice(
            id="gather-herbs",
            label="Gather herbs",
            description="Know your plants.",
            base_chance=0.65,
            success_text="The herbwife pays for a full basket.",
            fail_text="Half of it is weeds.",
            success=Effects(money=2, skill=1),
            fail=Effects(reputation=-1),
            effort=Effort.MENTAL,
            path=Path.TRADE,
        ),
        Choice(
            id="brew-remedy",
            label="Brew a remedy for yourself",
            description="Tend your own aches.",
            base_chance=0.7,
            success_text="The tea soothes your body.",
            fail_text="It tastes foul and does nothing.",
            success=Effects(health=2),
            effort=Effort.REST,
        ),
    ),
)

PICKPOCKET_MARKET = Scene(
    id="pickpocket-market",
    title="Crowded Market Day",
    text="The market is packed shoulder to shoulder. Purses dangle from every belt.",
    phase=ScenePhase.EARLY,
    vector=Path.CRIME,
    choices=(
        Choice(
            id="cut-purse",
            label="Cut a purse",
            description="Quick fingers, quicker feet.",
            base_chance=0.5,
            success_text="You slip away with a fat purse.",
            fail_text="A merchant grabs your wrist and shouts for the watch.",
            success=Effects(money=5, karma=-1),
            fail=Effects(reputation=-3, health=-1),
            effort=Effort.PHYSICAL,
            path=Path.CRIME,
        ),
        Choice(
            id="hawk-wares",
            label="Hawk cheap wares",
            description="Shout louder than the rest.",
            base_chance=0.6,
            success_text="You sell out by noon.",
            fail_text="Nobody buys a thing.",
            success=Effects(money=3),
            fail=Effects(money=-1),
            effort=Effort.SOCIAL,
            path=Path.TRADE,
        ),
        _walk_away(),
    ),
)


# ============================================================================
# Early tier, mid and late pacing
# ============================================================================

CARAVAN_GUARD = Scene(
    id="caravan-guard",
    title="Caravan Guard",
    text="A merchant caravan needs extra swords for the forest road.",
    vector=Path.SERVICE,
    choices=(
        Choice(
            id="guard-caravan",
            label="Guard the caravan",
            description="Good pay if you come back.",
            base_chance=0.6,
            success_text="Bandits try their luck and fail. The merchant pays a bonus.",
            fail_text="An arrow grazes your shoulder.",
            success=Effects(money=5, skill=1, reputation=1),
            fail=Effects(health=-3),
            min_health=MIN_HEALTH_FOR_COMBAT,
            effort=Effort.PHYSICAL,
            path=Path.SERVICE,
        ),
        Choice(
            id="tally-goods",
            label="Keep the ledgers instead",
            description="Counting beats bleeding.",
            base_chance=0.55,
            success_text="The merchant trusts your numbers.",
            fail_text="You miscount and owe the difference.",
            success=Effects(money=3, skill=1),
            fail=Effects(money=-2),
            effort=Effort.MENTAL,
            path=Path.TRADE,
        ),
        _walk_away(),
    ),
)

DEBT_COLLECTOR = Scene(
    id="debt-collector",
    title="The Moneylender",
    text="A moneylender offers a loan to those with empty pockets.",
    phase=ScenePhase.MID,
    vector=NEUTRAL_VECTOR,
    max_stats={"money": 3},
    choices=(
        Choice(
            id="take-loan",
            label="Take the loan",
            description="Coin now, interest later.",
            base_chance=0.9,
            success_text="He counts the coins into your palm.",
            fail_text="He asks for collateral you do not have.",
            success=Effects(money=5, reputation=-1),
            effort=Effort.SOCIAL,
            path=Path.TRADE,
        ),
        Choice(
            id="refuse-loan",
            label="Refuse",
            description="Debt is a chain.",
            base_chance=1.0,
            success_text="You walk out poorer but free.",
            fail_text="You walk out poorer but free.",
            effort=Effort.REST,
        ),
    ),
)

RIVAL_APPRENTICE = Scene(
    id="rival-apprentice",
    title="A Rival's Challenge",
    text="A rival apprentice challenges you to prove whose work is finer.",
    vector=Path.CRAFT,
    min_stats={"skill": 3},
    choices=(
        Choice(
            id="accept-contest",
            label="Accept the contest",
            description="Let the work speak.",
            base_chance=0.5,
            success_text="The judges favour your piece.",
            fail_text="Your piece cracks in the kiln.",
            success=Effects(reputation=3, skill=1),
            fail=Effects(reputation=-2),
            effort=Effort.MENTAL,
            path=Path.CRAFT,
        ),
        Choice(
            id="sabotage-rival",
            label="Sabotage their work",
            description="Win by any means.",
            base_chance=0.55,
            success_text="Their piece fails. Nobody suspects you.",
            fail_text="You are caught with the chisel in your hand.",
            success=Effects(reputation=2, karma=-2),
            fail=Effects(reputation=-4),
            effort=Effort.PHYSICAL,
            path=Path.CRIME,
        ),
        _walk_away("decline", "You shrug and let them boast."),
    ),
)

SMUGGLER_BOAT = Scene(
    id="smuggler-boat",
    title="The Night Boat",
    text="A flat boat slides up to the dock after dark. Barrels, no lanterns.",
    vector=Path.CRIME,
    choices=(
        Choice(
            id="unload-barrels",
            label="Unload the barrels",
            description="No tax stamps on these.",
            base_chance=0.6,
            success_text="The smugglers pay in silver.",
            fail_text="A barrel crushes your foot.",
            success=Effects(money=6, karma=-1),
            fail=Effects(health=-2),
            effort=Effort.PHYSICAL,
            path=Path.CRIME,
        ),
        Choice(
            id="report-boat",
            label="Report it to the harbormaster",
            description="The law pays informers, a little.",
            base_chance=0.5,
            success_text="The harbormaster rewards you.",
            fail_text="The harbormaster is on their payroll.",
            success=Effects(money=2, reputation=2, karma=1),
            fail=Effects(health=-2, reputation=-1),
            effort=Effort.SOCIAL,
            path=Path.SERVICE,
        ),
        _walk_away(),
    ),
)

WINTER_SHELTER = Scene(
    id="winter-shelter",
    title="Winter Shelter",
    text="Snow piles against the doors. The poorhouse has a few beds left.",
    phase=ScenePhase.MID,
    vector=NEUTRAL_VECTOR,
    seasons=(Season.WINTER,),
    choices=(
        Choice(
            id="take-bed",
            label="Take a bed",
            description="Warmth, at the cost of pride.",
            base_chance=0.85,
            success_text="You sleep warm for the first time in weeks.",
            fail_text="The beds are gone. You shiver in the hall.",
            success=Effects(health=2, reputation=-1),
            fail=Effects(health=-1),
            effort=Effort.REST,
        ),
        Choice(
            id="give-bed",
            label="Give your bed to a child",
            description="Someone needs it more.",
            base_chance=1.0,
            success_text="The child's mother weeps with gratitude.",
            fail_text="The child's mother weeps with gratitude.",
            success=Effects(health=-1, reputation=2, karma=2),
            fail=Effects(health=-1, reputation=2, karma=2),
            effort=Effort.SOCIAL,
            path=Path.SERVICE,
        ),
        Choice(
            id="chop-wood",
            label="Chop firewood for coin",
            description="Everyone needs wood in winter.",
            base_chance=0.7,
            success_text="Wood sells dear in a cold snap.",
            fail_text="The axe head flies off.",
            success=Effects(money=4),
            fail=Effects(health=-2),
            effort=Effort.PHYSICAL,
            path=Path.CRAFT,
        ),
    ),
)

HARVEST_HELP = Scene(
    id="harvest-help",
    title="Autumn Harvest",
    text="Wind scatters leaves across the stubble as the last carts roll in.",
    phase=ScenePhase.MID,
    vector=Path.CRAFT,
    seasons=(Season.AUTUMN,),
    choices=(
        Choice(
            id="bring-harvest",
            label="Bring in the harvest",
            description="Every hand is paid.",
            base_chance=0.8,
            success_text="The barns are full and so is your purse.",
            fail_text="You strain your back on the sheaves.",
            success=Effects(money=3, health=1),
            fail=Effects(health=-2),
            effort=Effort.PHYSICAL,
            path=Path.CRAFT,
        ),
        Choice(
            id="buy-grain",
            label="Buy grain to sell in winter",
            description="Prices rise when snow falls.",
            base_chance=0.5,
            success_text="You store the grain dry and safe.",
            fail_text="Rats get into the sacks.",
            success=Effects(money=4, skill=1),
            fail=Effects(money=-3),
            effort=Effort.MENTAL,
            path=Path.TRADE,
        ),
        _walk_away(),
    ),
)

SUMMER_FAIR = Scene(
    id="summer-fair",
    title="The Summer Fair",
    text="Jugglers, cattle and cloth merchants fill the meadow by the walls.",
    phase=ScenePhase.MID,
    vector=Path.TRADE,
    seasons=(Season.SUMMER,),
    choices=(
        Choice(
            id="rent-stall",
            label="Rent a stall",
            description="Pay up front, sell all day.",
            base_chance=0.55,
            success_text="Your stall does a roaring trade.",
            fail_text="Rain keeps the crowds away.",
            success=Effects(money=5, reputation=1),
            fail=Effects(money=-2),
            effort=Effort.SOCIAL,
            path=Path.TRADE,
        ),
        Choice(
            id="wrestling-ring",
            label="Enter the wrestling ring",
            description="Prize purse for the last one standing.",
            base_chance=0.35,
            success_text="You throw the champion. The crowd roars.",
            fail_text="You are thrown out of the ring.",
            success=Effects(money=4, reputation=3),
            fail=Effects(health=-2),
            min_health=MIN_HEALTH_FOR_COMBAT,
            effort=Effort.PHYSICAL,
            path=Path.SERVICE,
        ),
        Choice(
            id="enjoy-fair",
            label="Enjoy the fair",
            description="A day off.",
            base_chance=1.0,
            success_text="You eat sweet buns and watch the jugglers.",
            fail_text="You eat sweet buns and watch the jugglers.",
            success=Effects(health=1, money=-1),
            fail=Effects(health=1, money=-1),
            effort=Effort.REST,
        ),
    ),
)

OLD_SOLDIER = Scene(
    id="old-soldier",
    title="The Old Soldier",
    text="A one-legged veteran sits by the gate, offering advice for a drink.",
    phase=ScenePhase.LATE,
    vector=NEUTRAL_VECTOR,
    choices=(
        Choice(
            id="buy-drink",
            label="Buy him a drink",
            description="Stories are worth a coin.",
            base_chance=0.8,
            success_text="He teaches you how to read a fight.",
            fail_text="He falls asleep mid-story.",
            success=Effects(money=-1, skill=2),
            fail=Effects(money=-1),
            effort=Effort.MENTAL,
            path=Path.SERVICE,
        ),
        Choice(
            id="help-home",
            label="Help him home",
            description="Kindness for its own sake.",
            base_chance=0.9,
            success_text="His daughter thanks you at the door.",
            fail_text="He curses you the whole way.",
            success=Effects(reputation=1, karma=1),
            effort=Effort.PHYSICAL,
        ),
        _walk_away(),
    ),
)

TOWN_COUNCIL = Scene(
    id="town-council",
    title="The Town Council",
    text="The council meets in the guildhall to hear the grievances of common folk.",
    phase=ScenePhase.LATE,
    vector=NEUTRAL_VECTOR,
    min_turn=13,
    choices=(
        Choice(
            id="speak-up",
            label="Speak for your street",
            description="Be heard, or be mocked.",
            base_chance=0.5,
            success_text="The council grants your request.",
            fail_text="The councillors talk over you.",
            success=Effects(reputation=3, karma=1),
            fail=Effects(reputation=-1),
            effort=Effort.SOCIAL,
            path=Path.SERVICE,
        ),
        Choice(
            id="bribe-councillor",
            label="Slip a councillor a purse",
            description="Favours are for sale.",
            base_chance=0.6,
            success_text="A lucrative contract comes your way.",
            fail_text="He pockets the coin and forgets you.",
            success=Effects(money=4, reputation=1, karma=-1),
            fail=Effects(money=-3),
            effort=Effort.SOCIAL,
            path=Path.CRIME,
        ),
        _walk_away(),
    ),
)

LAST_WINTER = Scene(
    id="last-winter",
    title="A Hard Winter",
    text="A howling blizzard buries the road. Food runs short across the town.",
    phase=ScenePhase.LATE,
    vector=NEUTRAL_VECTOR,
    seasons=(Season.WINTER,),
    choices=(
        Choice(
            id="share-stores",
            label="Share your stores",
            description="Nobody should starve alone.",
            base_chance=1.0,
            success_text="Your neighbours never forget it.",
            fail_text="Your neighbours never forget it.",
            success=Effects(money=-2, reputation=2, karma=2),
            fail=Effects(money=-2, reputation=2, karma=2),
            effort=Effort.SOCIAL,
            path=Path.SERVICE,
        ),
        Choice(
            id="sell-dear",
            label="Sell food at famine prices",
            description="Scarcity pays.",
            base_chance=0.7,
            success_text="You grow rich while others go hungry.",
            fail_text="An angry crowd smashes your door.",
            success=Effects(money=6, reputation=-2, karma=-2),
            fail=Effects(reputation=-3, health=-1),
            effort=Effort.SOCIAL,
            path=Path.TRADE,
        ),
        Choice(
            id="hunker-down",
            label="Hunker down",
            description="Wait out the storm.",
            base_chance=1.0,
            success_text="You wait by the fire until the snow stops.",
            fail_text="You wait by the fire until the snow stops.",
            success=Effects(health=1),
            fail=Effects(health=1),
            effort=Effort.REST,
        ),
    ),
)


# ============================================================================
# Rising tier
# ============================================================================

FAMILY_HOME = Scene(
    id="family-home",
    title="Talk of Family",
    text="A neighbour hints that it is time you settled down.",
    min_stage=Stage.RISING,
    vector=NEUTRAL_VECTOR,
    choices=(
        Choice(
            id="start-family",
            label="Start a family",
            description="More mouths, more standing.",
            base_chance=0.6,
            success_text="You marry in the spring.",
            fail_text="The match falls through.",
            success=Effects(reputation=2, family=1, money=-2),
            fail=Effects(reputation=-1),
            min_health=MIN_HEALTH_FOR_FAMILY,
            effort=Effort.SOCIAL,
        ),
        Choice(
            id="matchmaker",
            label="Hire a matchmaker",
            description="A good name for a fee.",
            base_chance=0.45,
            success_text="The matchmaker finds a respectable family.",
            fail_text="The matchmaker takes the fee and vanishes.",
            success=Effects(family=1, reputation=3, money=-3),
            fail=Effects(money=-2),
            min_health=MIN_HEALTH_FOR_FAMILY,
            effort=Effort.SOCIAL,
        ),
        Choice(
            id="focus-work",
            label="Focus on work",
            description="Family can wait.",
            base_chance=0.7,
            success_text="Another week of steady wages.",
            fail_text="You work yourself sick.",
            success=Effects(money=3),
            fail=Effects(health=-2),
            effort=Effort.PHYSICAL,
            path=Path.CRAFT,
        ),
        _walk_away("delay-family", "You change the subject."),
    ),
)

MARKET_STALL = Scene(
    id="market-stall",
    title="A Market Stall",
    text="A stall on the square has come up for rent.",
    min_stage=Stage.RISING,
    vector=Path.TRADE,
    choices=(
        Choice(
            id="work-market",
            label="Work the stall",
            description="Steady trade.",
            base_chance=0.75,
            success_text="Customers come back for more.",
            fail_text="A rival undercuts you.",
            success=Effects(money=4, reputation=3),
            fail=Effects(reputation=-2, money=-1),
            effort=Effort.SOCIAL,
            path=Path.TRADE,
        ),
        Choice(
            id="buy-cheap",
            label="Buy a cheap lot",
            description="Gamble on resale.",
            base_chance=0.45,
            success_text="The lot sells for twice what you paid.",
            fail_text="The goods are rotten.",
            success=Effects(money=8, reputation=1),
            fail=Effects(money=-4),
            effort=Effort.MENTAL,
            path=Path.TRADE,
        ),
        Choice(
            id="haggle",
            label="Haggle with suppliers",
            description="Shave the margins.",
            base_chance=0.55,
            success_text="You squeeze out a better price.",
            fail_text="Suppliers refuse to deal with you.",
            success=Effects(money=3, reputation=1),
            fail=Effects(reputation=-2),
            effort=Effort.SOCIAL,
            path=Path.TRADE,
        ),
        _walk_away(),
    ),
)

GUILD_EXAM = Scene(
    id="guild-exam",
    title="The Guild Examination",
    text="The craft guild tests journeymen once a season.",
    min_stage=Stage.RISING,
    vector=Path.CRAFT,
    min_stats={"skill": 4},
    choices=(
        Choice(
            id="sit-exam",
            label="Present your masterwork",
            description="Pass and the guild opens its doors.",
            base_chance=0.5,
            success_text="The guild masters stamp your papers.",
            fail_text="The masters find a flaw.",
            success=Effects(skill=2, reputation=3, money=-1),
            fail=Effects(money=-1, reputation=-1),
            effort=Effort.MENTAL,
            path=Path.CRAFT,
        ),
        Choice(
            id="forge-papers",
            label="Forge guild papers",
            description="Skip the exam.",
            base_chance=0.4,
            success_text="Nobody looks twice at the seal.",
            fail_text="The guild clerk recognises the forgery.",
            success=Effects(reputation=2, karma=-2),
            fail=Effects(reputation=-4),
            effort=Effort.MENTAL,
            path=Path.CRIME,
        ),
        _walk_away("wait-next-year", "You decide to practise another year."),
    ),
)

BOUNTY_BOARD = Scene(
    id="bounty-board",
    title="The Bounty Board",
    text="The sheriff posts a reward for a bandit hiding in the hills.",
    min_stage=Stage.RISING,
    vector=Path.SERVICE,
    choices=(
        Choice(
            id="hunt-bandit",
            label="Hunt the bandit",
            description="Dangerous, well paid.",
            base_chance=0.45,
            success_text="You drag the bandit into town in chains.",
            fail_text="The bandit ambushes you.",
            success=Effects(money=6, reputation=3),
            fail=Effects(health=-3),
            min_health=MIN_HEALTH_FOR_COMBAT,
            effort=Effort.PHYSICAL,
            path=Path.SERVICE,
        ),
        Choice(
            id="sell-information",
            label="Sell his hideout to the sheriff",
            description="Let others do the fighting.",
            base_chance=0.55,
            success_text="The sheriff pays for your tip.",
            fail_text="Your tip is stale.",
            success=Effects(money=3, reputation=1),
            fail=Effects(reputation=-1),
            effort=Effort.SOCIAL,
            path=Path.TRADE,
        ),
        _walk_away(),
    ),
)

WAREHOUSE_LEASE = Scene(
    id="warehouse-lease",
    title="An Empty Warehouse",
    text="A riverside warehouse stands empty after its owner's ruin.",
    min_stage=Stage.RISING,
    vector=Path.TRADE,
    phase=ScenePhase.MID,
    min_stats={"money": 8},
    choices=(
        Choice(
            id="lease-warehouse",
            label="Lease the warehouse",
            description="Store goods, sell later.",
            base_chance=0.55,
            success_text="Your stored wool sells at a premium.",
            fail_text="Damp ruins the stock.",
            success=Effects(money=7, reputation=1),
            fail=Effects(money=-4),
            effort=Effort.MENTAL,
            path=Path.TRADE,
        ),
        Choice(
            id="hide-contraband",
            label="Rent it to smugglers",
            description="They pay without questions.",
            base_chance=0.6,
            success_text="Silver appears under the door each week.",
            fail_text="The watch raids the place.",
            success=Effects(money=6, karma=-2),
            fail=Effects(reputation=-4, money=-2),
            effort=Effort.SOCIAL,
            path=Path.CRIME,
        ),
        _walk_away(),
    ),
)

FENCING_RING = Scene(
    id="fencing-ring",
    title="The Fencing School",
    text="A fencing master takes paying students in a draughty hall.",
    min_stage=Stage.RISING,
    vector=Path.SERVICE,
    choices=(
        Choice(
            id="take-lessons",
            label="Pay for lessons",
            description="A sword arm is an investment.",
            base_chance=0.65,
            success_text="The master calls you a natural.",
            fail_text="You leave bruised and no wiser.",
            success=Effects(skill=3, money=-2),
            fail=Effects(money=-2, health=-1),
            effort=Effort.PHYSICAL,
            path=Path.SERVICE,
        ),
        Choice(
            id="sweep-hall",
            label="Sweep the hall and watch",
            description="Learn for free.",
            base_chance=0.7,
            success_text="You pick up the footwork by watching.",
            fail_text="The master chases you out.",
            success=Effects(skill=1),
            effort=Effort.MENTAL,
            path=Path.SERVICE,
        ),
        _walk_away(),
    ),
)


# ============================================================================
# Established tier
# ============================================================================

FAMILY_GROWTH = Scene(
    id="family-growth",
    title="A Growing Household",
    text="Your household could grow, if you can afford it.",
    min_stage=Stage.ESTABLISHED,
    vector=NEUTRAL_VECTOR,
    choices=(
        Choice(
            id="support-family",
            label="Welcome a child",
            description="Joy and expense.",
            base_chance=0.5,
            success_text="A healthy child is born.",
            fail_text="Not this year.",
            success=Effects(family=1, reputation=1, money=-1),
            fail=Effects(reputation=1),
            min_health=MIN_HEALTH_FOR_FAMILY,
            effort=Effort.SOCIAL,
        ),
        Choice(
            id="hire-help",
            label="Hire a servant",
            description="Status costs coin.",
            base_chance=0.6,
            success_text="The house runs smoothly.",
            fail_text="The servant steals the silver.",
            success=Effects(reputation=1, money=-2),
            fail=Effects(money=-2),
            effort=Effort.SOCIAL,
            path=Path.TRADE,
        ),
        Choice(
            id="move-home",
            label="Move to a better street",
            description="Be seen among the right people.",
            base_chance=0.4,
            success_text="The neighbours bow when you pass.",
            fail_text="The new house leaks.",
            success=Effects(reputation=2, money=-3),
            fail=Effects(money=-4),
            effort=Effort.SOCIAL,
        ),
        _walk_away("postpone-growth", "You leave things as they are."),
    ),
)

TOWN_GUARD = Scene(
    id="town-guard",
    title="The Town Guard",
    text="The captain of the guard is looking for a reliable sergeant.",
    min_stage=Stage.ESTABLISHED,
    vector=Path.SERVICE,
    choices=(
        Choice(
            id="join-guard",
            label="Join the guard",
            description="Pay, rank and respect.",
            base_chance=0.6,
            success_text="You are given a halberd and a post.",
            fail_text="The captain prefers another man.",
            success=Effects(money=6, reputation=4, skill=1),
            fail=Effects(reputation=-2),
            effort=Effort.PHYSICAL,
            path=Path.SERVICE,
        ),
        Choice(
            id="challenge-duel",
            label="Challenge the sergeant to a duel",
            description="Take the post by force.",
            base_chance=0.4,
            success_text="The sergeant yields. The post is yours.",
            fail_text="You are beaten in front of the whole barracks.",
            success=Effects(reputation=5, skill=1),
            fail=Effects(health=-3, reputation=-3),
            min_health=MIN_HEALTH_FOR_COMBAT,
            effort=Effort.PHYSICAL,
            path=Path.SERVICE,
        ),
        Choice(
            id="bribe-clerk",
            label="Bribe the clerk",
            description="Skip the queue.",
            base_chance=0.5,
            success_text="Your name moves to the top of the list.",
            fail_text="The clerk takes the coin and loses your name.",
            success=Effects(reputation=2, money=-2, karma=-1),
            fail=Effects(money=-3),
            effort=Effort.SOCIAL,
            path=Path.CRIME,
        ),
        Choice(
            id="night-watch",
            label="Volunteer for the night watch",
            description="Cold nights, honest pay.",
            base_chance=0.65,
            success_text="You catch a burglar red-handed.",
            fail_text="You fall asleep at your post.",
            success=Effects(reputation=2, money=2),
            fail=Effects(reputation=-2),
            effort=Effort.PHYSICAL,
            path=Path.SERVICE,
        ),
    ),
)

MERCHANT_GUILD = Scene(
    id="merchant-guild",
    title="The Merchant Guild",
    text="The merchant guild invites you to invest in a shipment of spices.",
    min_stage=Stage.ESTABLISHED,
    vector=Path.TRADE,
    choices=(
        Choice(
            id="invest-shipment",
            label="Invest in the shipment",
            description="A long voyage, a big return.",
            base_chance=0.5,
            success_text="The ship returns heavy with pepper.",
            fail_text="The ship is lost in a storm.",
            success=Effects(money=10, reputation=2),
            fail=Effects(money=-6),
            effort=Effort.MENTAL,
            path=Path.TRADE,
        ),
        Choice(
            id="join-guild",
            label="Buy guild membership",
            description="Expensive, but doors open.",
            base_chance=0.7,
            success_text="Your name is entered into the guild book.",
            fail_text="The guild elders blackball you.",
            success=Effects(reputation=4, money=-4),
            fail=Effects(money=-2, reputation=-1),
            effort=Effort.SOCIAL,
            path=Path.TRADE,
        ),
        _walk_away(),
    ),
)

WORKSHOP_EXPANSION = Scene(
    id="workshop-expansion",
    title="A Bigger Workshop",
    text="Orders pile up faster than you can fill them.",
    min_stage=Stage.ESTABLISHED,
    vector=Path.CRAFT,
    choices=(
        Choice(
            id="take-apprentice",
            label="Take on an apprentice",
            description="Teach and grow.",
            base_chance=0.65,
            success_text="Your apprentice learns fast.",
            fail_text="The apprentice breaks more than they make.",
            success=Effects(money=5, reputation=2, skill=1),
            fail=Effects(money=-2),
            effort=Effort.MENTAL,
            path=Path.CRAFT,
        ),
        Choice(
            id="work-nights",
            label="Work through the nights",
            description="Do it all yourself.",
            base_chance=0.6,
            success_text="Every order ships on time.",
            fail_text="You collapse over the workbench.",
            success=Effects(money=6, skill=1),
            fail=Effects(health=-3),
            effort=Effort.PHYSICAL,
            path=Path.CRAFT,
        ),
        _walk_away(),
    ),
)

THIEVES_GUILD = Scene(
    id="thieves-guild",
    title="A Quiet Invitation",
    text="A note under your door names a cellar, a time, and a password.",
    min_stage=Stage.ESTABLISHED,
    vector=Path.CRIME,
    choices=(
        Choice(
            id="join-thieves",
            label="Go to the cellar",
            description="The underworld has its own nobility.",
            base_chance=0.55,
            success_text="The guildmaster offers you a share of the docks.",
            fail_text="It was a trap set by the watch.",
            success=Effects(money=8, karma=-2),
            fail=Effects(reputation=-5, health=-1),
            effort=Effort.SOCIAL,
            path=Path.CRIME,
        ),
        Choice(
            id="burn-note",
            label="Burn the note",
            description="Some doors stay shut.",
            base_chance=1.0,
            success_text="The note curls into ash.",
            fail_text="The note curls into ash.",
            success=Effects(karma=1),
            fail=Effects(karma=1),
            effort=Effort.REST,
        ),
    ),
)


# ============================================================================
# Noble tier
# ============================================================================

NOBLE_COURT = Scene(
    id="noble-court",
    title="The Noble's Court",
    text="You are received at the court of the local lord.",
    min_stage=Stage.NOBLE,
    vector=Path.SERVICE,
    choices=(
        Choice(
            id="offer-service",
            label="Offer your service",
            description="Swear yourself to the lord.",
            base_chance=0.55,
            success_text="The lord accepts your oath.",
            fail_text="The lord has no use for you.",
            success=Effects(reputation=8, money=6),
            fail=Effects(reputation=-3),
            effort=Effort.SOCIAL,
            path=Path.SERVICE,
        ),
        Choice(
            id="broker-deal",
            label="Broker a deal",
            description="Trade between noble houses.",
            base_chance=0.45,
            success_text="Both houses pay you for the deal.",
            fail_text="Both houses blame you.",
            success=Effects(money=12, reputation=4),
            fail=Effects(reputation=-4, money=-3),
            effort=Effort.MENTAL,
            path=Path.TRADE,
        ),
        Choice(
            id="host-feast",
            label="Host a feast",
            description="Spend to be remembered.",
            base_chance=0.4,
            success_text="The feast is talked about for years.",
            fail_text="The wine runs out before the toasts.",
            success=Effects(reputation=6, money=-4),
            fail=Effects(reputation=-5, money=-2),
            effort=Effort.SOCIAL,
        ),
        Choice(
            id="seek-alliances",
            label="Seek alliances",
            description="Friends in high places.",
            base_chance=0.5,
            success_text="A baron calls you friend.",
            fail_text="You are snubbed.",
            success=Effects(reputation=5, skill=1),
            fail=Effects(reputation=-4),
            effort=Effort.SOCIAL,
            path=Path.SERVICE,
        ),
    ),
)

LAND_GRANT = Scene(
    id="land-grant",
    title="A Grant of Land",
    text="The crown offers a manor to those who can pay the fee and hold the land.",
    min_stage=Stage.NOBLE,
    vector=NEUTRAL_VECTOR,
    choices=(
        Choice(
            id="buy-manor",
            label="Pay for the manor",
            description="Land is the only true wealth.",
            base_chance=0.6,
            success_text="The deed bears your name.",
            fail_text="The crown sells it to a cousin instead.",
            success=Effects(money=-8, reputation=8),
            fail=Effects(money=-2),
            effort=Effort.MENTAL,
            path=Path.TRADE,
        ),
        _walk_away("decline-land", "You prefer your town house."),
    ),
)

TOURNAMENT = Scene(
    id="tournament",
    title="The Tournament",
    text="Knights from three counties ride for the duke's favour.",
    min_stage=Stage.NOBLE,
    vector=Path.SERVICE,
    choices=(
        Choice(
            id="ride-joust",
            label="Ride in the joust",
            description="Glory or a broken neck.",
            base_chance=0.45,
            success_text="You unhorse the duke's champion.",
            fail_text="A lance shatters against your chest.",
            success=Effects(reputation=7, skill=2),
            fail=Effects(health=-4, reputation=-2),
            min_health=MIN_HEALTH_FOR_COMBAT,
            effort=Effort.PHYSICAL,
            path=Path.SERVICE,
        ),
        Choice(
            id="sponsor-knight",
            label="Sponsor a knight",
            description="Let someone else bleed.",
            base_chance=0.55,
            success_text="Your knight wins and bows to you.",
            fail_text="Your knight is carried off the field.",
            success=Effects(reputation=4, money=-3),
            fail=Effects(money=-4),
            effort=Effort.SOCIAL,
            path=Path.TRADE,
        ),
        _walk_away("watch-tournament", "You watch from the stands."),
    ),
)

BISHOP_AUDIENCE = Scene(
    id="bishop-audience",
    title="An Audience with the Bishop",
    text="The bishop seeks patrons for a new cathedral.",
    min_stage=Stage.NOBLE,
    vector=NEUTRAL_VECTOR,
    choices=(
        Choice(
            id="fund-cathedral",
            label="Fund a chapel",
            description="Your name carved in stone.",
            base_chance=0.8,
            success_text="A chapel bears your name.",
            fail_text="The bishop wants more than you offered.",
            success=Effects(money=-6, reputation=5, karma=2),
            fail=Effects(money=-2),
            effort=Effort.SOCIAL,
        ),
        Choice(
            id="sell-indulgences",
            label="Sell indulgences on commission",
            description="Piety is profitable.",
            base_chance=0.6,
            success_text="Sinners pay handsomely.",
            fail_text="A preacher denounces you in the square.",
            success=Effects(money=8, karma=-3),
            fail=Effects(reputation=-4),
            effort=Effort.SOCIAL,
            path=Path.CRIME,
        ),
        _walk_away(),
    ),
)


SCENES: tuple[Scene, ...] = (
    # Start
    CITY_GATE,
    ORPHAN_ALLEY,
    MASTERS_WORKSHOP,
    REFUGEE_CAMP,
    VILLAGE_FIELD,
    # Early
    DOCKWORK,
    ALLEY_FAVOR,
    TRAINING_YARD,
    TAVERN_NIGHT,
    MONASTERY_GATES,
    TOWN_WELL,
    RIVER_FISHING,
    SPRING_PLANTING,
    SMITHY,
    HERB_GATHERING,
    PICKPOCKET_MARKET,
    CARAVAN_GUARD,
    DEBT_COLLECTOR,
    RIVAL_APPRENTICE,
    SMUGGLER_BOAT,
    WINTER_SHELTER,
    HARVEST_HELP,
    SUMMER_FAIR,
    OLD_SOLDIER,
    TOWN_COUNCIL,
    LAST_WINTER,
    # Rising
    FAMILY_HOME,
    MARKET_STALL,
    GUILD_EXAM,
    BOUNTY_BOARD,
    WAREHOUSE_LEASE,
    FENCING_RING,
    # Established
    FAMILY_GROWTH,
    TOWN_GUARD,
    MERCHANT_GUILD,
    WORKSHOP_EXPANSION,
    THIEVES_GUILD,
    # Noble
    NOBLE_COURT,
    LAND_GRANT,
    TOURNAMENT,
    BISHOP_AUDIENCE,
) + ERRANDS


def get_scene_by_id(scene_id: str) -> Scene | None:
    """Get a scene by ID."""
    for scene in SCENES:
        if scene.id == scene_id:
            return scene
    return None
