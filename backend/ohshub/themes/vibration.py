"""Vibration (trillingen) theme: hand-arm and whole-body vibration.

Severity per sub-topic is read from ``EXPOSURE_LEVELS``, a literal lookup on
the daily duration bucket and whether complaints are known. Existing control
measures never change a severity; they only make the measurement
recommendation more urgent when none are in place.
"""

from ohshub.core.aggregation import VerdictBuilder
from ohshub.core.answers import AnswerSet, get_choice, get_choices
from ohshub.core.enums import QuestionType, RiskLevel
from ohshub.schemas.verdict import Verdict

STEPS = [
    {
        "id": "inventory",
        "title": "Inventarisatie",
        "description": "Breng in kaart welke trillende gereedschappen, machines en voertuigen worden gebruikt en welke functies zijn blootgesteld.",
        "questions": [
            {
                "id": "vib-type",
                "label": "Welk type trillingen komt voor op de werkplek? (meerdere mogelijk)",
                "type": QuestionType.MULTI_CHOICE,
                "help_text": "Hand-armtrillingen (HAV) ontstaan bij het vasthouden van trillend gereedschap. Hele-lichaamstrillingen (WBV) treden op bij het besturen of rijden op voertuigen en mobiele werktuigen.",
                "options": [
                    {"value": "hav", "label": "Hand-armtrillingen (HAV) — gebruik van trillende handgereedschappen, slijpmachines, boren, hamers"},
                    {"value": "wbv", "label": "Hele-lichaamstrillingen (WBV) — gebruik van voertuigen, heftrucks, bouwmachines, landbouwvoertuigen"},
                ],
            },
            {
                "id": "vib-tools",
                "label": "Welke trillende gereedschappen of voertuigen worden gebruikt?",
                "type": QuestionType.FREE_TEXT,
                "help_text": "Geef zo specifiek mogelijk aan welke apparatuur wordt gebruikt. Fabrikant en type zijn nodig voor het opzoeken van vibratiewaarden in de productdocumentatie (EU-conformiteitsverklaring, art. 7.18a Arbobesluit).",
            },
            {
                "id": "vib-duration",
                "label": "Hoe lang wordt dagelijks gewerkt met trillende gereedschappen of voertuigen?",
                "type": QuestionType.SINGLE_CHOICE,
                "options": [
                    {"value": "short", "label": "Kort — minder dan 30 minuten per dag"},
                    {"value": "medium", "label": "Matig — 30 minuten tot 2 uur per dag"},
                    {"value": "long", "label": "Lang — meer dan 2 uur per dag"},
                ],
            },
            {
                "id": "vib-complaints",
                "label": "Zijn er klachten bekend bij medewerkers die met trillend gereedschap of voertuigen werken?",
                "type": QuestionType.SINGLE_CHOICE,
                "help_text": "Klachten die wijzen op HAVS: witte vingers (Raynaud), tintelingen, gevoelloosheid, verminderde grijpkracht. WBV-klachten: chronische lage rugpijn, nekklachten.",
                "options": [
                    {"value": "yes", "label": "Ja, er zijn klachten bekend"},
                    {"value": "no", "label": "Nee, geen bekende klachten"},
                    {"value": "unknown", "label": "Onbekend"},
                ],
            },
        ],
    },
    {
        "id": "current-measures",
        "title": "Huidige maatregelen",
        "description": "Inventariseer welke beheersmaatregelen al aanwezig zijn.",
        "questions": [
            {
                "id": "vib-measures-existing",
                "label": "Welke maatregelen zijn al genomen? (meerdere mogelijk)",
                "type": QuestionType.MULTI_CHOICE,
                "options": [
                    {"value": "low-vib-tools", "label": "Gebruik van gecertificeerd laagtrillend gereedschap"},
                    {"value": "rotation", "label": "Werktaakroulatie om blootstellingsduur te beperken"},
                    {"value": "ppe", "label": "Trillingsdempende handschoenen of zitdemping (WBV)"},
                    {"value": "maintenance", "label": "Regelmatig onderhoud van gereedschappen en voertuigen"},
                    {"value": "training", "label": "Voorlichting en instructie aan medewerkers"},
                    {"value": "health-monitoring", "label": "Gezondheidstoezicht (PAGO/PMO op HAVS of rugklachten)"},
                    {"value": "none", "label": "Geen specifieke maatregelen getroffen"},
                ],
            },
        ],
    },
]

TYPE_OPTIONS = ("hav", "wbv")
DURATION_OPTIONS = ("short", "medium", "long")
COMPLAINT_OPTIONS = ("yes", "no", "unknown")
MEASURE_OPTIONS = (
    "low-vib-tools",
    "rotation",
    "ppe",
    "maintenance",
    "training",
    "health-monitoring",
    "none",
)

# (duration bucket, complaints known) -> severity; anything else is LOW,
# including a missing duration.
EXPOSURE_LEVELS: dict[tuple[str, bool], RiskLevel] = {
    ("long", True): RiskLevel.HIGH,
    ("long", False): RiskLevel.MEDIUM,
    ("medium", True): RiskLevel.MEDIUM,
}

GAP_DURATION = "Gebruiksduur per dag niet opgegeven — nodig voor A(8)-berekening."
GAP_TYPE = "Type trillingen (HAV/WBV) niet gespecificeerd."
GAP_COMPLAINTS = "Klachteninventarisatie bij medewerkers niet uitgevoerd."
GAP_MEASURES = "Huidige beheersmaatregelen niet geïnventariseerd."

# Sub-topics in output order. The first recommendation of each is the
# measurement step whose priority depends on existing measures.
SUB_TOPICS = [
    {
        "type": "hav",
        "topic": "Hand-armtrillingen (HAV)",
        "summary_long": "Langdurig gebruik van trillend handgereedschap. Actiewaarde (EAV = 2,5 m/s²) mogelijk overschreden.",
        "summary": "Blootstelling aan hand-armtrillingen vastgesteld. Kwantificeer A(8) via fabrikantwaarden en gebruiksduur.",
        "detail": "Conform Arbobesluit art. 6.11b dient de dagelijkse trillingsblootstelling A(8) niet de ELV van 5,0 m/s² te overschrijden. Boven de EAV van 2,5 m/s² zijn actieve beheersmaatregelen verplicht.",
        "legal_basis": "Arbobesluit art. 6.11a–6.11g; Richtlijn 2002/44/EG; ISO 5349-1/2",
        "measurement": {
            "action": "Bepaal de dagelijkse trillingsblootstelling A(8) op basis van EU-conformiteitsverklaring vibratiewaarden en werkelijk gemeten gebruiksduur per gereedschapstype.",
            "rationale": "Noodzakelijk voor toetsing aan EAV (2,5 m/s²) en ELV (5,0 m/s²) conform art. 6.11b Arbobesluit.",
            "legal_basis": "Arbobesluit art. 6.11b; ISO 5349-1",
        },
        "recommendations": [
            {
                "priority": 2,
                "stage": "Technisch",
                "action": "Vervang hoog-trillend gereedschap door gecertificeerde laagtrillende alternatieven (raadpleeg HAV-productdatabase HSE of TNO).",
                "rationale": "Bronmaatregel conform de arbeidshygienische strategie: reductie van trillingsemissie aan de bron heeft prioriteit boven organisatorische en persoonlijke maatregelen.",
                "legal_basis": "Arbobesluit art. 6.11e; Arbeidshygienische strategie",
            },
            {
                "priority": 2,
                "stage": "Organisatorisch",
                "action": "Voer werktaakroulatie in: beperk de continue gebruiksduur per medewerker per gereedschapstype en gun hersteltijd.",
                "rationale": "Beperkt de cumulatieve trillingsenergie per werkdag en reduceert risico op HAVS.",
            },
            {
                "priority": 3,
                "stage": "Gezondheidstoezicht",
                "action": "Stel periodiek gezondheidstoezicht (PAGO) in voor blootgestelde medewerkers met de Stockholm Workshop Scale voor vroegherkenning van HAVS.",
                "rationale": "Vroegtijdige signalering van HAVS (witte vingers, neuropathie) maakt tijdige interventie mogelijk.",
                "legal_basis": "Arbobesluit art. 6.11g",
            },
        ],
    },
    {
        "type": "wbv",
        "topic": "Hele-lichaamstrillingen (WBV)",
        "summary_long": "Dagelijks langdurig rijden op voertuigen. Actiewaarde (EAV = 0,5 m/s²) mogelijk overschreden.",
        "summary": "Blootstelling aan hele-lichaamstrillingen vastgesteld. Kwantificeer A(8) via meting of fabrikantdocumentatie.",
        "detail": "Conform Arbobesluit art. 6.11b dient de dagelijkse WBV-blootstelling A(8) niet de ELV van 1,15 m/s² te overschrijden. Boven EAV van 0,5 m/s² zijn maatregelen verplicht.",
        "legal_basis": "Arbobesluit art. 6.11a–6.11g; Richtlijn 2002/44/EG; ISO 2631-1",
        "measurement": {
            "action": "Meet of bereken de dagelijkse WBV-blootstelling A(8) conform ISO 2631-1; raadpleeg de voertuigfabrikant voor emissiewaarden (EU-typegoedkeuring).",
            "rationale": "Noodzakelijk voor toetsing aan EAV (0,5 m/s²) en ELV (1,15 m/s²) conform art. 6.11b Arbobesluit.",
            "legal_basis": "Arbobesluit art. 6.11b; ISO 2631-1",
        },
        "recommendations": [
            {
                "priority": 2,
                "stage": "Technisch",
                "action": "Pas actieve of passieve zitdemping toe (ISO 7096-gecertificeerde trillingsgedempte bestuurdersstoel). Onderhoud rijbaanoppervlakken.",
                "rationale": "Vermindert de overdracht van voertuigtrillingen naar het lichaam van de bestuurder.",
            },
            {
                "priority": 3,
                "stage": "Organisatorisch",
                "action": "Plan rijpauzes en taakroulatie om de cumulatieve WBV-blootstelling per dag te beperken; vermijd onverharde of beschadigde rijroutes.",
                "rationale": "Beperkt de totale dagelijkse trillingsenergie en geeft het lichaam hersteltijd.",
            },
        ],
    },
]


def exposure_level(duration: str | None, has_complaints: bool) -> RiskLevel:
    """Look up the severity for a duration bucket and complaint status."""
    if duration is None:
        return RiskLevel.LOW
    return EXPOSURE_LEVELS.get((duration, has_complaints), RiskLevel.LOW)


def assess_risk(answers: AnswerSet) -> Verdict:
    """Assess vibration exposure from the collected answers.

    Args:
        answers: Raw answer set; it is only read

    Returns:
        Verdict with one finding per selected vibration type, or a single
        low "Trillingen" finding when no type is selected
    """
    types = get_choices(answers, "vib-type", TYPE_OPTIONS)
    duration = get_choice(answers, "vib-duration", DURATION_OPTIONS)
    complaints = get_choice(answers, "vib-complaints", COMPLAINT_OPTIONS)
    measures = get_choices(answers, "vib-measures-existing", MEASURE_OPTIONS)

    builder = VerdictBuilder()

    if duration is None:
        builder.add_data_gap(GAP_DURATION)
    if not types:
        builder.add_data_gap(GAP_TYPE)
    if complaints is None or complaints == "unknown":
        builder.add_data_gap(GAP_COMPLAINTS)
    if not measures:
        builder.add_data_gap(GAP_MEASURES)

    has_complaints = complaints == "yes"
    no_measures = not measures or "none" in measures
    level = exposure_level(duration, has_complaints)

    for sub_topic in SUB_TOPICS:
        if sub_topic["type"] not in types:
            continue

        builder.add_finding(
            topic=sub_topic["topic"],
            level=level,
            summary=sub_topic["summary_long"] if duration == "long" else sub_topic["summary"],
            detail=sub_topic["detail"],
            legal_basis=sub_topic["legal_basis"],
        )
        builder.add_recommendation(
            priority=1 if no_measures else 2,
            stage="Meting",
            **sub_topic["measurement"],
        )
        for recommendation in sub_topic["recommendations"]:
            builder.add_recommendation(**recommendation)

    if not types:
        builder.add_finding(
            topic="Trillingen",
            level=RiskLevel.LOW,
            summary="Op basis van de inventarisatie zijn geen aanwijzingen voor significante trillingsblootstelling vastgesteld.",
            detail="Herhaal de inventarisatie bij introductie van nieuwe gereedschappen, machines of voertuigen.",
        )

    return builder.build()
