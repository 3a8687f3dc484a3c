"""
World Events - Recurring and major events applied without player choice.

EVENTS is the recurring pool, drawn without replacement from a per-run
shuffled deck. MAJOR_EVENTS fire once in the late-game window.
"""

from ..engine_core.content import WorldEvent
from ..engine_core.stats import Effects


EVENTS: tuple[WorldEvent, ...] = (
    WorldEvent(
        id="good-harvest",
        title="Good Harvest",
        text="Grain prices fall. Food gets cheaper.",
        effects=Effects(money=2, health=1, luck=1),
    ),
    WorldEvent(
        id="market-fraud",
        title="Market Fraud",
        text="A trader cheats you on the scales. Some of your coin is gone.",
        effects=Effects(money=-3, reputation=-1, luck=-1),
    ),
    WorldEvent(
        id="fever",
        title="Fever",
        text="Sickness sweeps through the town. You grow weaker.",
        effects=Effects(health=-3),
    ),
    WorldEvent(
        id="patron-gift",
        title="Patron's Gift",
        text="An influential acquaintance lends you a hand.",
        effects=Effects(money=4, reputation=2, luck=1),
    ),
    WorldEvent(
        id="brawl",
        title="Street Brawl",
        text="A scuffle leaves scars, but hardens your resolve.",
        effects=Effects(health=-2, skill=1),
    ),
    WorldEvent(
        id="quiet-season",
        title="Quiet Season",
        text="The town settles down. You recover.",
        effects=Effects(health=2),
    ),
    WorldEvent(
        id="storm",
        title="Storm",
        text="A storm ruins supplies and plans alike.",
        effects=Effects(money=-2, health=-1, luck=-1),
    ),
    WorldEvent(
        id="tax-collector",
        title="Tax Collector",
        text="The town levies an extra tax.",
        effects=Effects(money=-3),
    ),
    WorldEvent(
        id="lost-purse",
        title="Lost Purse",
        text="Someone drops a purse right next to you.",
        effects=Effects(money=3, reputation=-1, luck=1, karma=-1),
    ),
    WorldEvent(
        id="free-soup",
        title="Free Soup",
        text="Wandering monks hand out food.",
        effects=Effects(health=1, reputation=1),
    ),
    WorldEvent(
        id="road-toll",
        title="Road Toll",
        text="Collectors demand payment for passage.",
        effects=Effects(money=-2),
    ),
    WorldEvent(
        id="kind-stranger",
        title="Kind Stranger",
        text="A stranger shares a meal with you.",
        effects=Effects(health=1),
    ),
    WorldEvent(
        id="minor-injury",
        title="Minor Injury",
        text="One clumsy move and a bruise to show for it.",
        effects=Effects(health=-1),
    ),
    WorldEvent(
        id="market-boost",
        title="Busy Market",
        text="Trade goes better than usual.",
        effects=Effects(money=2),
    ),
    WorldEvent(
        id="bad-rumors",
        title="Bad Rumors",
        text="People speak ill of you.",
        effects=Effects(reputation=-2),
    ),
    WorldEvent(
        id="good-word",
        title="A Good Word",
        text="Someone puts in a good word for you.",
        effects=Effects(reputation=2),
    ),
    WorldEvent(
        id="tool-break",
        title="Broken Tool",
        text="Work becomes harder.",
        effects=Effects(skill=-1, money=-1),
    ),
    WorldEvent(
        id="lucky-find",
        title="Lucky Find",
        text="You come across something useful.",
        effects=Effects(money=1, skill=1, luck=2),
    ),
    WorldEvent(
        id="small-feast",
        title="Small Feast",
        text="You are invited to share a meal.",
        effects=Effects(health=2),
    ),
    WorldEvent(
        id="rainy-week",
        title="Rainy Week",
        text="Less work, worse moods.",
        effects=Effects(money=-1, fatigue=1),
    ),
    WorldEvent(
        id="first-frost",
        title="First Frost",
        text="A bitter cold settles over the roofs. Firewood costs double.",
        effects=Effects(money=-1, health=-1),
    ),
    WorldEvent(
        id="autumn-fair",
        title="Autumn Fair",
        text="Leaves drift over the fairground as merchants call out their wares.",
        effects=Effects(money=1, reputation=1),
    ),
)

MAJOR_EVENTS: tuple[WorldEvent, ...] = (
    WorldEvent(
        id="plague",
        title="The Plague",
        text="A plague reaches the town. Half the streets fall silent.",
        effects=Effects(health=-4, money=-2),
    ),
    WorldEvent(
        id="war-levy",
        title="War Levy",
        text="The lord calls his banners. Every household pays for the war.",
        effects=Effects(money=-5, reputation=1),
    ),
    WorldEvent(
        id="great-fire",
        title="Great Fire",
        text="Fire spreads through the lower town. You save what you can.",
        effects=Effects(money=-4, health=-1, karma=1),
    ),
    WorldEvent(
        id="royal-pardon",
        title="Royal Pardon",
        text="A new king is crowned and old debts are forgiven.",
        effects=Effects(money=4, reputation=2, luck=1),
    ),
)
