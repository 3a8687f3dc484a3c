"""
Errands - Everyday work scenes that can come up at any point of a life.

Each path gets a broad spread of errands so a run leaning toward one path
keeps finding matching scenes until the last turn. Errands carry no phase
and few gates; the scene graph in scenes.py holds the paced content.
"""

from ..engine_core.content import Choice, Effort, Path, Scene
from ..engine_core.stats import NO_EFFECTS, Effects, Season, Stage

FAIR_SEASONS = (Season.SPRING, Season.SUMMER, Season.AUTUMN)


def _task(
    choice_id: str,
    label: str,
    base_chance: float,
    success_text: str,
    fail_text: str,
    success: Effects,
    fail: Effects = NO_EFFECTS,
    effort: Effort = Effort.PHYSICAL,
    path: Path | None = None,
    **kwargs,
) -> Choice:
    return Choice(
        id=choice_id,
        label=label,
        base_chance=base_chance,
        success_text=success_text,
        fail_text=fail_text,
        success=success,
        fail=fail,
        effort=effort,
        path=path,
        **kwargs,
    )


def _errand(scene_id: str, title: str, text: str, vector: Path, *choices: Choice, **gates) -> Scene:
    return Scene(id=scene_id, title=title, text=text, vector=vector, choices=choices, **gates)


def _rest(choice_id: str = "take-it-easy") -> Choice:
    return _task(
        choice_id, "Take it easy", 1.0,
        "You spend the day catching your breath.",
        "You spend the day catching your breath.",
        NO_EFFECTS, NO_EFFECTS, Effort.REST,
    )


# ============================================================================
# Service
# ============================================================================

SERVICE_ERRANDS = (
    _errand(
        "ferry-crossing", "The Ferry Crossing",
        "The ferryman's son is sick and a line of travellers waits on the bank.",
        Path.SERVICE,
        _task("pole-ferry", "Pole the ferry across", 0.65,
              "The travellers pay their fares into your palm.",
              "The current drags the raft and you arrive soaked and late.",
              Effects(money=2), Effects(health=-1), Effort.PHYSICAL, Path.SERVICE),
        _task("direct-crowd", "Keep the line in order", 0.75,
              "The ferryman thanks you for keeping the peace.",
              "A merchant shoves past and curses you.",
              Effects(reputation=1), Effects(reputation=-1), Effort.SOCIAL, Path.SERVICE),
    ),
    _errand(
        "night-watch", "Night Watch",
        "The watch captain is short a man for the walls tonight.",
        Path.SERVICE,
        _task("stand-watch", "Stand the watch", 0.6,
              "A quiet night and a full wage.",
              "You doze off and the captain docks your pay.",
              Effects(money=2, reputation=1), Effects(reputation=-1, fatigue=1), Effort.PHYSICAL, Path.SERVICE),
        _rest("decline-watch"),
    ),
    _errand(
        "stable-hand", "The Stables",
        "The coaching inn needs someone to muck out and brush down the horses.",
        Path.SERVICE,
        _task("muck-stalls", "Muck out the stalls", 0.8,
              "Dirty work, honest coin.",
              "A mare kicks you in the shin.",
              Effects(money=1), Effects(health=-1), Effort.PHYSICAL, Path.SERVICE),
        _task("groom-horses", "Groom a lord's horses", 0.5,
              "The groom notices your gentle hands.",
              "You tangle a mane and get shouted at.",
              Effects(money=1, reputation=1), Effects(reputation=-1), Effort.MENTAL, Path.SERVICE),
    ),
    _errand(
        "courier-run", "A Sealed Letter",
        "A clerk needs a letter carried to the next village before nightfall.",
        Path.SERVICE,
        _task("run-letter", "Run the letter", 0.6,
              "You arrive before the bells and are paid twice over.",
              "You take a wrong fork and arrive after dark.",
              Effects(money=3), Effects(fatigue=1), Effort.PHYSICAL, Path.SERVICE),
        _task("hire-boy", "Pass it to a faster boy", 0.7,
              "He delivers it and you split the fee.",
              "He loses the letter and the clerk blames you.",
              Effects(money=1), Effects(reputation=-1), Effort.SOCIAL, Path.TRADE),
    ),
    _errand(
        "inn-kitchen", "The Inn Kitchen",
        "Steam, shouting and a cook with one helper too few.",
        Path.SERVICE,
        _task("scrub-pots", "Scrub pots all evening", 0.85,
              "You leave with coin and a bowl of stew.",
              "You scald your hands on the cauldron.",
              Effects(money=1, health=1), Effects(health=-1), Effort.PHYSICAL, Path.SERVICE),
        _task("serve-tables", "Serve the tables", 0.6,
              "The guests tip well.",
              "You spill ale over a guardsman.",
              Effects(money=2), Effects(reputation=-1), Effort.SOCIAL, Path.SERVICE),
    ),
    _errand(
        "lamp-lighter", "Lighting the Lamps",
        "Dusk falls and the lamplighter's ladder leans against the wall unattended.",
        Path.SERVICE,
        _task("light-lamps", "Light the street lamps", 0.75,
              "The square glows and the alderman pays you.",
              "You fall off the ladder.",
              Effects(money=1, reputation=1), Effects(health=-2), Effort.PHYSICAL, Path.SERVICE,
              min_health=3),
        _rest("walk-past"),
    ),
    _errand(
        "herald-errand", "The Herald's Errand",
        "The herald has lost his voice and a proclamation must be read in three squares.",
        Path.SERVICE,
        _task("read-proclamation", "Read the proclamation", 0.55,
              "Your voice carries and people remember your face.",
              "You stumble over the words and the crowd jeers.",
              Effects(reputation=2), Effects(reputation=-1), Effort.SOCIAL, Path.SERVICE),
        _task("carry-board", "Carry the notice board", 0.85,
              "A plain job, plainly paid.",
              "The board is heavier than it looks.",
              Effects(money=1), Effects(fatigue=1), Effort.PHYSICAL, Path.SERVICE),
    ),
    _errand(
        "temple-porter", "Temple Porter",
        "Pilgrims arrive with more baggage than prayers.",
        Path.SERVICE,
        _task("carry-baggage", "Carry their baggage", 0.7,
              "A pilgrim blesses you and presses a coin into your hand.",
              "A strap snaps and a chest bursts open on the steps.",
              Effects(money=1, karma=1), Effects(reputation=-1), Effort.PHYSICAL, Path.SERVICE),
        _task("guide-pilgrims", "Guide them through town", 0.6,
              "They pay for the tour and the tales.",
              "You get them lost in the tanners' quarter.",
              Effects(money=2), NO_EFFECTS, Effort.SOCIAL, Path.SERVICE),
    ),
    _errand(
        "militia-drill", "Militia Drill",
        "The militia drills on the common and the sergeant is looking for volunteers.",
        Path.SERVICE,
        _task("join-drill", "Join the drill", 0.6,
              "You learn to hold a spear and earn the sergeant's nod.",
              "You are knocked flat by a shield.",
              Effects(skill=1, reputation=1), Effects(health=-1), Effort.PHYSICAL, Path.SERVICE),
        _rest("watch-drill"),
    ),
)


# ============================================================================
# Crime
# ============================================================================

CRIME_ERRANDS = (
    _errand(
        "loaded-dice", "Loaded Dice",
        "A stranger in the back room offers you a pair of dice that always roll sevens.",
        Path.CRIME,
        _task("play-loaded", "Play with the loaded dice", 0.5,
              "You walk out with a heavy purse.",
              "The players notice and throw you into the gutter.",
              Effects(money=3, karma=-1), Effects(health=-1, reputation=-1), Effort.SOCIAL, Path.CRIME),
        _task("warn-players", "Warn the other players", 0.7,
              "The honest players buy you a drink.",
              "The stranger's friends wait for you outside.",
              Effects(reputation=1, karma=1), Effects(health=-1), Effort.SOCIAL),
    ),
    _errand(
        "fence-goods", "Goods of Uncertain Origin",
        "A man with a sack of silver spoons needs a buyer who asks no questions.",
        Path.CRIME,
        _task("find-buyer", "Find him a buyer", 0.55,
              "You take a cut without touching the spoons.",
              "The buyer turns out to be a constable's cousin.",
              Effects(money=2, karma=-1), Effects(reputation=-2), Effort.SOCIAL, Path.CRIME),
        _task("walk-off", "Refuse and walk away", 1.0,
              "You keep your hands clean.",
              "You keep your hands clean.",
              NO_EFFECTS, NO_EFFECTS, Effort.REST),
    ),
    _errand(
        "rooftop-job", "Across the Rooftops",
        "An open window on the third floor of a merchant's house.",
        Path.CRIME,
        _task("climb-in", "Climb in", 0.45,
              "A purse on the dresser, and no one the wiser.",
              "A tile slips and you fall into the alley.",
              Effects(money=4, karma=-1), Effects(health=-2), Effort.PHYSICAL, Path.CRIME,
              min_health=4),
        _task("keep-lookout", "Keep lookout for someone else", 0.7,
              "Your share comes the next morning.",
              "The thief never pays you.",
              Effects(money=1, karma=-1), NO_EFFECTS, Effort.MENTAL, Path.CRIME),
    ),
    _errand(
        "forged-seal", "The Forged Seal",
        "A scribe offers to teach you how to copy a guild seal.",
        Path.CRIME,
        _task("learn-forgery", "Learn the trick", 0.5,
              "Your hand is steadier than you thought.",
              "You smear the wax and the scribe laughs.",
              Effects(skill=1, karma=-1), NO_EFFECTS, Effort.MENTAL, Path.CRIME),
        _task("sell-forgery", "Sell a forged pass", 0.45,
              "A desperate traveller pays anything for it.",
              "The gate guard spots the fake at once.",
              Effects(money=3, karma=-1), Effects(reputation=-2), Effort.SOCIAL, Path.CRIME),
    ),
    _errand(
        "cutpurse-fair", "Crowds at the Fair",
        "The fair packs the square shoulder to shoulder.",
        Path.CRIME,
        _task("cut-purses", "Cut a few purses", 0.5,
              "Three purses, one of them fat.",
              "A woman screams and the crowd closes around you.",
              Effects(money=3, karma=-1), Effects(health=-1, reputation=-1), Effort.PHYSICAL, Path.CRIME),
        _task("sell-pies", "Sell pies instead", 0.7,
              "Hungry fairgoers buy every pie.",
              "Rain drives the crowd away.",
              Effects(money=1), NO_EFFECTS, Effort.SOCIAL, Path.TRADE),
        seasons=FAIR_SEASONS,
    ),
    _errand(
        "toll-dodge", "The Toll Bridge",
        "Carters grumble at the new toll on the bridge.",
        Path.CRIME,
        _task("show-ford", "Show them the hidden ford", 0.6,
              "Each carter tips you for the shortcut.",
              "A cart overturns in the river.",
              Effects(money=2, karma=-1), Effects(reputation=-1), Effort.SOCIAL, Path.CRIME),
        _task("help-pay", "Help them unload for the weigh-in", 0.8,
              "Honest sweat for a copper or two.",
              "You strain your back.",
              Effects(money=1), Effects(health=-1), Effort.PHYSICAL, Path.SERVICE),
    ),
    _errand(
        "card-sharp", "The Card Sharp",
        "An old card sharp needs a partner to distract the marks.",
        Path.CRIME,
        _task("play-partner", "Play the distraction", 0.55,
              "The marks never notice the swapped deck.",
              "A mark recognises the game and knocks out a tooth.",
              Effects(money=2, karma=-1), Effects(health=-1), Effort.SOCIAL, Path.CRIME),
        _task("learn-cards", "Just watch and learn", 0.8,
              "You learn how the cards are marked.",
              "You learn nothing useful.",
              Effects(skill=1), NO_EFFECTS, Effort.MENTAL),
    ),
    _errand(
        "false-alms", "The Alms Box",
        "The chapel alms box sits unwatched while the priest naps.",
        Path.CRIME,
        _task("empty-box", "Empty the alms box", 0.6,
              "Coins for the taking.",
              "The priest wakes and recognises you.",
              Effects(money=2, karma=-2), Effects(reputation=-2, karma=-1), Effort.PHYSICAL, Path.CRIME),
        _task("drop-coin", "Drop in a coin of your own", 1.0,
              "You feel lighter for it.",
              "You feel lighter for it.",
              Effects(money=-1, karma=1), Effects(money=-1, karma=1), Effort.REST),
    ),
    _errand(
        "dock-smuggling", "Barrels After Dark",
        "A bargeman needs barrels moved off the books before the customs men wake.",
        Path.CRIME,
        _task("move-barrels", "Move the barrels", 0.55,
              "Quick work and good silver.",
              "The customs men wake early.",
              Effects(money=3, karma=-1), Effects(money=-1, reputation=-1), Effort.PHYSICAL, Path.CRIME),
        _rest("stay-home"),
    ),
)


# ============================================================================
# Craft
# ============================================================================

CRAFT_ERRANDS = (
    _errand(
        "cobbler-bench", "The Cobbler's Bench",
        "The cobbler's eyes are failing and a stack of boots waits to be resoled.",
        Path.CRAFT,
        _task("resole-boots", "Resole the boots", 0.6,
              "Neat stitches, paid by the pair.",
              "You cut the leather too short.",
              Effects(money=2, skill=1), Effects(money=-1), Effort.MENTAL, Path.CRAFT),
        _task("sort-leather", "Sort the leather scraps", 0.9,
              "The cobbler pays you in coppers.",
              "Nothing worth sorting today.",
              Effects(money=1), NO_EFFECTS, Effort.PHYSICAL, Path.CRAFT),
    ),
    _errand(
        "rope-walk", "The Rope Walk",
        "The ropemakers walk backward down the long shed, twisting hemp.",
        Path.CRAFT,
        _task("twist-hemp", "Twist hemp all day", 0.7,
              "Your rope holds at the test.",
              "Your strand frays and has to be cut away.",
              Effects(money=2), Effects(fatigue=1), Effort.PHYSICAL, Path.CRAFT),
        _task("learn-knots", "Learn the sailor's knots", 0.75,
              "Your fingers remember the knots.",
              "Your fingers tangle.",
              Effects(skill=1), NO_EFFECTS, Effort.MENTAL, Path.CRAFT),
    ),
    _errand(
        "pottery-kiln", "The Pottery Kiln",
        "The potter's kiln needs tending through the night.",
        Path.CRAFT,
        _task("tend-kiln", "Tend the kiln", 0.65,
              "Every pot comes out whole.",
              "A crack runs through half the batch.",
              Effects(money=2, skill=1), Effects(money=-1), Effort.MENTAL, Path.CRAFT),
        _task("throw-pots", "Try the wheel", 0.5,
              "Your first bowl is lopsided but sells.",
              "The clay flies off the wheel.",
              Effects(money=1, skill=1), NO_EFFECTS, Effort.MENTAL, Path.CRAFT),
    ),
    _errand(
        "cart-wheel", "The Broken Wheel",
        "A farmer's cart sits lopsided in the road with a cracked wheel.",
        Path.CRAFT,
        _task("mend-wheel", "Mend the wheel", 0.6,
              "The cart rolls again and the farmer pays in coin and apples.",
              "The spoke splits in your hands.",
              Effects(money=2, health=1), Effects(fatigue=1), Effort.PHYSICAL, Path.CRAFT),
        _task("fetch-wright", "Fetch the wheelwright", 0.85,
              "The farmer thanks you for the trouble.",
              "The wheelwright is drunk.",
              Effects(reputation=1), NO_EFFECTS, Effort.SOCIAL, Path.SERVICE),
    ),
    _errand(
        "thatch-roof", "A Leaking Roof",
        "A widow's thatch leaks into her kitchen.",
        Path.CRAFT,
        _task("rethatch", "Rethatch the roof", 0.6,
              "The roof holds through the next storm.",
              "You slide off the wet straw.",
              Effects(money=1, karma=1, skill=1), Effects(health=-2), Effort.PHYSICAL, Path.CRAFT,
              min_health=4),
        _task("patch-leak", "Patch the worst leak", 0.85,
              "She sends you off with bread.",
              "The patch blows away by morning.",
              Effects(health=1), NO_EFFECTS, Effort.PHYSICAL, Path.CRAFT),
    ),
    _errand(
        "loom-shed", "The Weaving Shed",
        "The weavers need a hand to card wool and feed the looms.",
        Path.CRAFT,
        _task("feed-looms", "Feed the looms", 0.75,
              "Bolt after bolt rolls off the looms.",
              "You break a heddle.",
              Effects(money=2), Effects(money=-1), Effort.PHYSICAL, Path.CRAFT),
        _task("weave-pattern", "Weave a pattern of your own", 0.45,
              "The master weaver buys your cloth.",
              "The pattern comes out crooked.",
              Effects(money=2, skill=1), NO_EFFECTS, Effort.MENTAL, Path.CRAFT),
    ),
    _errand(
        "carving-stall", "The Carving Stall",
        "A woodcarver at the market lets apprentices sell small figures beside his own.",
        Path.CRAFT,
        _task("carve-figures", "Carve a few figures", 0.6,
              "Children tug their parents to your table.",
              "The knife slips.",
              Effects(money=2, skill=1), Effects(health=-1), Effort.MENTAL, Path.CRAFT),
        _rest("browse-market"),
    ),
    _errand(
        "tannery", "The Tannery",
        "The stench of the tannery keeps most workers away, so it pays well.",
        Path.CRAFT,
        _task("scrape-hides", "Scrape hides", 0.7,
              "Good pay for foul work.",
              "The lye burns your arms.",
              Effects(money=3), Effects(health=-1), Effort.PHYSICAL, Path.CRAFT),
        _task("hold-breath", "Sweep the yard outside", 0.9,
              "A copper for the sweeping.",
              "The foreman sends you off.",
              Effects(money=1), NO_EFFECTS, Effort.PHYSICAL, Path.CRAFT),
    ),
)


# ============================================================================
# Trade
# ============================================================================

TRADE_ERRANDS = (
    _errand(
        "spice-haggle", "The Spice Seller",
        "A foreign spice seller struggles with the local tongue.",
        Path.TRADE,
        _task("translate-deals", "Haggle on his behalf", 0.6,
              "He pays you a share of every sale.",
              "You mistake a price and he loses money.",
              Effects(money=2, reputation=1), Effects(reputation=-1), Effort.SOCIAL, Path.TRADE),
        _task("buy-pepper", "Buy a pouch of pepper to resell", 0.5,
              "The cook at the inn pays double.",
              "The pepper is half sawdust.",
              Effects(money=2), Effects(money=-1), Effort.SOCIAL, Path.TRADE),
    ),
    _errand(
        "wool-bargain", "Wool Day",
        "Shepherds bring their fleeces to the market cross.",
        Path.TRADE,
        _task("broker-wool", "Broker a bale of wool", 0.55,
              "The weavers pay more than the shepherds asked.",
              "The bale is damp and rotten underneath.",
              Effects(money=3), Effects(money=-1), Effort.SOCIAL, Path.TRADE),
        _task("haul-bales", "Haul bales for a copper", 0.85,
              "Honest hauling.",
              "A bale lands on your foot.",
              Effects(money=1), Effects(health=-1), Effort.PHYSICAL, Path.SERVICE),
        seasons=FAIR_SEASONS,
    ),
    _errand(
        "grain-broker", "The Grain Exchange",
        "Rumours of a poor harvest move the price of grain by the hour.",
        Path.TRADE,
        _task("buy-grain", "Buy a sack now", 0.5,
              "The price climbs and you sell at a profit.",
              "The rumour was false and prices drop.",
              Effects(money=3), Effects(money=-2), Effort.MENTAL, Path.TRADE),
        _task("tally-sacks", "Tally sacks for the broker", 0.8,
              "The broker likes a clean count.",
              "You miscount and are sent away.",
              Effects(money=1, skill=1), NO_EFFECTS, Effort.MENTAL, Path.TRADE),
    ),
    _errand(
        "peddler-cart", "The Peddler's Cart",
        "An old peddler offers to rent you his cart of ribbons and buttons for a day.",
        Path.TRADE,
        _task("work-cart", "Work the cart", 0.6,
              "Ribbons sell fast on market day.",
              "Nobody stops to look.",
              Effects(money=2), NO_EFFECTS, Effort.SOCIAL, Path.TRADE),
        _task("learn-prices", "Ask him about prices", 0.8,
              "He shares a lifetime of haggling lore.",
              "He rambles about his late wife.",
              Effects(skill=1), NO_EFFECTS, Effort.MENTAL, Path.TRADE),
    ),
    _errand(
        "salt-merchant", "The Salt Road",
        "A salt merchant needs a clerk to weigh and record his sales.",
        Path.TRADE,
        _task("weigh-salt", "Weigh and record", 0.7,
              "Every grain accounted for.",
              "The scales were rigged and you get the blame.",
              Effects(money=2), Effects(reputation=-1), Effort.MENTAL, Path.TRADE),
        _rest("pass-by"),
    ),
    _errand(
        "pawn-counter", "The Pawnbroker",
        "The pawnbroker needs someone who can tell brass from gold.",
        Path.TRADE,
        _task("appraise-goods", "Appraise the pledges", 0.55,
              "Your eye earns you a fee.",
              "You pass brass as gold.",
              Effects(money=2, skill=1), Effects(money=-1), Effort.MENTAL, Path.TRADE),
        _task("mind-counter", "Mind the counter", 0.85,
              "A quiet day behind the grille.",
              "A customer shouts at you for an hour.",
              Effects(money=1), NO_EFFECTS, Effort.SOCIAL, Path.TRADE),
    ),
    _errand(
        "horse-fair", "The Horse Fair",
        "Dealers crowd the paddock trading nags and chargers.",
        Path.TRADE,
        _task("flip-pony", "Buy a pony and sell it on", 0.45,
              "You sell her to a farmer for twice the price.",
              "She goes lame overnight.",
              Effects(money=4), Effects(money=-2), Effort.SOCIAL, Path.TRADE),
        _task("walk-horses", "Walk horses for the dealers", 0.85,
              "A copper per horse.",
              "A stallion drags you through the mud.",
              Effects(money=1), Effects(health=-1), Effort.PHYSICAL, Path.SERVICE),
        seasons=FAIR_SEASONS,
    ),
    _errand(
        "candle-stall", "The Candle Stall",
        "Tallow is cheap this week and candles are always needed.",
        Path.TRADE,
        _task("sell-candles", "Sell candles door to door", 0.65,
              "Every house wants a few.",
              "A dog chases you off three streets.",
              Effects(money=2), NO_EFFECTS, Effort.SOCIAL, Path.TRADE),
        _task("dip-candles", "Dip candles for the chandler", 0.8,
              "Slow, warm work.",
              "Hot wax spills on your hand.",
              Effects(money=1), Effects(health=-1), Effort.PHYSICAL, Path.CRAFT),
    ),
    _errand(
        "ledger-clerk", "The Counting House",
        "A counting house needs a clerk to copy ledgers.",
        Path.TRADE,
        _task("copy-ledgers", "Copy the ledgers", 0.6,
              "Neat columns earn a neat wage.",
              "An ink blot ruins a page.",
              Effects(money=2, skill=1), Effects(reputation=-1), Effort.MENTAL, Path.TRADE),
        _rest("skip-work"),
    ),
    _errand(
        "fishmonger", "The Fish Market",
        "The boats came in heavy and the fishmongers cannot sell fast enough.",
        Path.TRADE,
        _task("cry-fish", "Cry the catch", 0.7,
              "Your voice sells the whole catch by noon.",
              "The fish spoil in the sun.",
              Effects(money=2), Effects(money=-1), Effort.SOCIAL, Path.TRADE),
        _task("gut-fish", "Gut fish behind the stalls", 0.9,
              "You earn a coin and a fish supper.",
              "You cut your thumb.",
              Effects(money=1, health=1), Effects(health=-1), Effort.PHYSICAL, Path.SERVICE),
    ),
)


# ============================================================================
# Rising errands
# ============================================================================

RISING_ERRANDS = (
    _errand(
        "hired-escort", "An Escort for Hire",
        "A wealthy widow wants a trusted escort on the road to her sister's manor.",
        Path.SERVICE,
        _task("escort-widow", "Escort her", 0.6,
              "She arrives safe and speaks well of you.",
              "Bandits take her jewels and your pride.",
              Effects(money=3, reputation=2), Effects(health=-2, reputation=-1), Effort.PHYSICAL, Path.SERVICE,
              min_health=5),
        _task("recommend-guard", "Recommend a guard you know", 0.8,
              "She pays a finder's fee.",
              "Your friend never turns up.",
              Effects(money=1), Effects(reputation=-1), Effort.SOCIAL, Path.SERVICE),
        min_stage=Stage.RISING,
    ),
    _errand(
        "contraband-deal", "A Bigger Deal",
        "Word has spread that you can move goods quietly. A captain has a hold full of lace.",
        Path.CRIME,
        _task("move-lace", "Move the lace", 0.5,
              "The lace sells in a week and the captain pays in gold.",
              "The lace is seized and the captain wants his money.",
              Effects(money=5, karma=-1), Effects(money=-3, reputation=-1), Effort.SOCIAL, Path.CRIME),
        _rest("turn-down-captain"),
        min_stage=Stage.RISING,
    ),
    _errand(
        "commission-piece", "A Commission",
        "A merchant's wife wants a carved chest for her daughter's dowry.",
        Path.CRAFT,
        _task("build-chest", "Build the chest", 0.55,
              "The chest is admired at the wedding.",
              "The lid warps in the damp.",
              Effects(money=4, reputation=1, skill=1), Effects(money=-1), Effort.MENTAL, Path.CRAFT),
        _task("simple-box", "Offer a simpler box", 0.85,
              "She takes it, a little disappointed.",
              "She refuses it.",
              Effects(money=2), NO_EFFECTS, Effort.MENTAL, Path.CRAFT),
        min_stage=Stage.RISING,
    ),
    _errand(
        "shop-partner", "A Partnership",
        "A shopkeeper with a bad leg offers you a share of the shop in return for the legwork.",
        Path.TRADE,
        _task("take-share", "Take the share", 0.6,
              "Custom grows and your share with it.",
              "A slow season eats into your savings.",
              Effects(money=4, reputation=1), Effects(money=-2), Effort.SOCIAL, Path.TRADE),
        _task("help-once", "Help out for a week", 0.85,
              "He pays fairly for the week.",
              "He forgets to pay.",
              Effects(money=2), NO_EFFECTS, Effort.PHYSICAL, Path.TRADE),
        min_stage=Stage.RISING,
    ),
)


ERRANDS = SERVICE_ERRANDS + CRIME_ERRANDS + CRAFT_ERRANDS + TRADE_ERRANDS + RISING_ERRANDS
