"""Theme registry.

Every theme module exposes ``STEPS`` (plain step definitions) and optionally
``assess_risk``. The registry validates all schemas once at import, so a
broken theme fails at startup instead of in the middle of a wizard session.
"""

from types import MappingProxyType

from ohshub.core.answers import AnswerSet, freeze_answers
from ohshub.core.exceptions import RiskEngineUnavailableError, UnknownThemeError
from ohshub.schemas.verdict import Verdict
from ohshub.schemas.wizard import Step, build_steps
from ohshub.themes import (
    bio_agents,
    climate,
    hazardous_substances,
    lighting,
    physical_load,
    sound,
    vibration,
)
from ohshub.themes.base import RiskEngine, WizardConfig

THEMES = [
    {
        "theme_id": "sound",
        "name": "Geluid",
        "description": "Geluidsbelasting, gehoorschade en RI&E geluid op de werkplek.",
        "intro": "Langdurige blootstelling aan te hoog geluid is in Nederland een veelvoorkomende oorzaak van beroepsziekte en blijvend gehoorverlies. Dit stappenplan begeleidt u door een systematische beoordeling: van het in kaart brengen van geluidsbronnen en blootstelling per functie tot het kiezen van de juiste technische en organisatorische maatregelen. Aan het einde krijgt u een overzicht dat direct bruikbaar is als input voor de RI&E en het plan van aanpak.",
        "module": sound,
    },
    {
        "theme_id": "vibration",
        "name": "Trillingen",
        "description": "Hand-armtrillingen (HAV) en hele-lichaamstrillingen (WBV) op de werkplek.",
        "intro": "Beoordeling van blootstelling aan hand-armtrillingen (HAV) en hele-lichaamstrillingen (WBV) conform de Europese Trillingenrichtlijn 2002/44/EG en Arbobesluit art. 6.11a–6.11g. Langdurige blootstelling kan leiden tot het Hand-Arm Vibration Syndrome (HAVS), witte vingers of chronische rugklachten.",
        "module": vibration,
    },
    {
        "theme_id": "bio-agents",
        "name": "Biologische agentia",
        "description": "Blootstelling aan micro-organismen, endotoxinen en allergenen.",
        "intro": "In sectoren zoals de gezondheidszorg, landbouw en afvalverwerking kunnen medewerkers worden blootgesteld aan bacteriën, virussen, schimmels en andere biologische agentia. De risico's variëren sterk per sector, activiteit en de risicoklasse van het agens. Dit stappenplan helpt u de blootstelling systematisch in beeld te brengen, de juiste insluitingsmaatregelen te kiezen en het gezondheidstoezicht te organiseren.",
        "module": bio_agents,
    },
    {
        "theme_id": "hazardous-substances",
        "name": "Gevaarlijke stoffen",
        "description": "Chemische blootstellingslimieten, GHS/CMR en vervangingsplicht.",
        "intro": "Contact met gevaarlijke stoffen op het werk kan leiden tot acute en chronische gezondheidsschade, variërend van huid- en luchtwegirritatie tot beroepskanker. De arbeidshygiënische strategie schrijft voor dat u altijd begint bij de bron: vervanging door minder gevaarlijke alternatieven gaat vóór technische maatregelen, die op hun beurt vóór persoonlijke beschermingsmiddelen komen. Dit stappenplan begeleidt u stap voor stap door die afweging.",
        "module": hazardous_substances,
    },
    {
        "theme_id": "lighting",
        "name": "Verlichting",
        "description": "Werkplekverlichting, verlichtingssterkte en visueel comfort.",
        "intro": "Een goede werkplekverlichting vermindert visuele vermoeidheid, voorkomt fouten en draagt bij aan de veiligheid van medewerkers. Onvoldoende of ongepaste verlichting is een onderschat risico dat leidt tot klachten als hoofdpijn, verhoogde foutkans en een hoger risico op ongelukken. Dit stappenplan helpt u de verlichtingssituatie systematisch te beoordelen op basis van de aard en nauwkeurigheid van de uitgevoerde taken.",
        "module": lighting,
    },
    {
        "theme_id": "physical-load",
        "name": "Fysieke belasting",
        "description": "Ergonomie, tilnormen en beoordeling van fysieke arbeidsbelasting.",
        "intro": "Lichamelijke klachten door werk zijn een van de meest voorkomende oorzaken van ziekteverzuim in Nederland. Handmatig tillen, repeterende bewegingen en langdurige ongunstige werkhoudingen zijn bekende risicofactoren die leiden tot klachten aan rug, schouders en armen. Dit stappenplan begeleidt u van inventarisatie en risicobeoordeling naar effectieve ergonomische en technische maatregelen, afgestemd op de specifieke taken en functies.",
        "module": physical_load,
    },
    {
        "theme_id": "climate",
        "name": "Klimaat",
        "description": "Thermisch comfort, WBGT en beoordeling van werkplekklimaat.",
        "intro": "Het thermisch klimaat op de werkplek beïnvloedt het welzijn, de prestaties en de veiligheid van medewerkers rechtstreeks. Zowel hitte- als koudebelasting kunnen leiden tot serieuze gezondheidsrisico's, met name in combinatie met zwaar fysiek werk of beschermende kleding. Dit stappenplan helpt u de klimaatsituatie systematisch te inventariseren, te meten en passende technische en organisatorische maatregelen te kiezen.",
        "module": climate,
    },
]


def _build_registry() -> MappingProxyType:
    registry = {}
    for theme in THEMES:
        module = theme["module"]
        registry[theme["theme_id"]] = WizardConfig(
            theme_id=theme["theme_id"],
            name=theme["name"],
            description=theme["description"],
            intro=theme["intro"],
            steps=tuple(build_steps(module.STEPS)),
            assess_risk=getattr(module, "assess_risk", None),
        )
    return MappingProxyType(registry)


REGISTRY = _build_registry()


def list_wizard_configs() -> list[WizardConfig]:
    """All themes in display order."""
    return list(REGISTRY.values())


def get_wizard_config(theme_id: str) -> WizardConfig:
    """Get a theme configuration.

    Raises:
        UnknownThemeError: If no theme is registered under ``theme_id``
    """
    config = REGISTRY.get(theme_id)
    if config is None:
        raise UnknownThemeError(theme_id)
    return config


def get_schema(theme_id: str) -> list[Step]:
    """Ordered, immutable steps of a theme."""
    return list(get_wizard_config(theme_id).steps)


def get_engine(theme_id: str) -> RiskEngine | None:
    """Risk engine of a theme, None when the theme has none."""
    return get_wizard_config(theme_id).assess_risk


def assess_theme(theme_id: str, answers: AnswerSet) -> Verdict:
    """Run a theme's risk engine on a read-only view of ``answers``.

    Raises:
        UnknownThemeError: If no theme is registered under ``theme_id``
        RiskEngineUnavailableError: If the theme has no risk engine
    """
    engine = get_engine(theme_id)
    if engine is None:
        raise RiskEngineUnavailableError(theme_id)
    return engine(freeze_answers(answers))
