"""Hazardous substances (gevaarlijke stoffen) theme.

Rules follow the occupational hygiene strategy and the Arbobesluit chapter 4
obligations. Most rules map one single-choice answer to a finding and a
recommendation; those live in outcome tables keyed by answer value. The CMR
rules only apply when CMR 1A/1B categories are checked, the same condition
that shows the CMR questions.

Recommendation priorities follow rule order: every emitted recommendation
takes the next number.
"""

from collections.abc import Iterator
from itertools import count

from ohshub.core.aggregation import VerdictBuilder
from ohshub.core.answers import AnswerSet, get_choice, get_choices
from ohshub.core.enums import QuestionType, RiskLevel
from ohshub.schemas.verdict import Verdict
from ohshub.schemas.wizard import all_of, answer_in, includes, not_

HAS_CMR = includes("haz2-categories", "cmr-1a", "cmr-1b")
IS_QUANTIFIED = answer_in("haz3-quantified", "yes-nen689", "yes-rekentool", "yes-indicative")
PPE_BESIDES_NONE = all_of(
    includes("haz4-ppe", "respirator", "gloves", "eye-clothing", "usage-monitored"),
    not_(includes("haz4-ppe", "none")),
)

STEPS = [
    # ── Stap 1: Werkplek & blootgestelde medewerkers ──────────────────────────
    {
        "id": "haz-step1-workplace",
        "title": "Werkplek & blootgestelde medewerkers",
        "description": "Beschrijf de werkplek en breng in kaart welke medewerkers(groepen) worden blootgesteld aan gevaarlijke stoffen en bij welke taken.",
        "questions": [
            {
                "id": "haz1-sector",
                "label": "In welke sector of branche is uw organisatie actief?",
                "type": QuestionType.SINGLE_CHOICE,
                "options": [
                    {"value": "manufacturing", "label": "Industrie / productie"},
                    {"value": "construction", "label": "Bouw / installatie"},
                    {"value": "healthcare", "label": "Zorg / laboratorium"},
                    {"value": "agriculture", "label": "Agrarisch / tuinbouw"},
                    {"value": "cleaning", "label": "Schoonmaak / facilitair"},
                    {"value": "other", "label": "Anders"},
                ],
            },
            {
                "id": "haz1-workers",
                "label": "Hoeveel medewerkers worden (mogelijk) blootgesteld aan gevaarlijke stoffen?",
                "type": QuestionType.SINGLE_CHOICE,
                "options": [
                    {"value": "1", "label": "1 medewerker"},
                    {"value": "2-10", "label": "2 – 10 medewerkers"},
                    {"value": "11-50", "label": "11 – 50 medewerkers"},
                    {"value": "50+", "label": "Meer dan 50 medewerkers"},
                ],
            },
            {
                "id": "haz1-tasks",
                "label": "Beschrijf de taken of werkprocessen waarbij blootstelling optreedt, en welke medewerkergroepen daarbij betrokken zijn.",
                "type": QuestionType.FREE_TEXT,
                "required": False,
                "placeholder": "Bijv. spuiten van verf in cabine (spuiter), reinigen met oplosmiddelen (monteur), mengen van additieven (productiemedewerker)…",
                "help_text": "Denk ook aan schoonmaak, onderhoud, laden/lossen en incidentele taken. Vergeet zzp'ers, uitzendkrachten en stagiairs niet.",
            },
            {
                "id": "haz1-rie",
                "label": "Is de risicobeoordeling gevaarlijke stoffen al opgenomen in een actuele RI&E?",
                "type": QuestionType.SINGLE_CHOICE,
                "help_text": "De RI&E moet actueel zijn bij relevante wijzigingen en minimaal elke 4 jaar getoetst worden door een gecertificeerd arbodeskundige (>25 medewerkers).",
                "options": [
                    {"value": "yes", "label": "Ja — volledig en actueel"},
                    {"value": "partial", "label": "Gedeeltelijk — niet volledig of niet actueel"},
                    {"value": "no", "label": "Nee — RI&E ontbreekt of gevaarlijke stoffen zijn niet opgenomen"},
                ],
            },
        ],
    },

    # ── Stap 2: Stoffen en gevaarseigenschappen ───────────────────────────────
    {
        "id": "haz-step2-substances",
        "title": "Stoffen en gevaarseigenschappen",
        "description": "Breng in kaart welke gevaarlijke stoffen aanwezig zijn, wat hun gevaarseigenschappen zijn en of er CMR-stoffen bij zitten.",
        "questions": [
            {
                "id": "haz2-sds",
                "label": "Is er voor elke gevaarlijke stof een actueel Veiligheidsinformatieblad (VIB/SDS) beschikbaar en zijn alle stoffen in een stoffenregister opgenomen?",
                "type": QuestionType.SINGLE_CHOICE,
                "help_text": "Controleer de uitgiftedatum in VIB-rubriek 1. Grenswaarden en aanbevolen PBM staan in rubriek 8.",
                "options": [
                    {
                        "value": "yes",
                        "label": "Ja — actueel (niet ouder dan 3 jaar), volledig stoffenregister aanwezig",
                    },
                    {
                        "value": "partial",
                        "label": "Gedeeltelijk — niet voor alle stoffen, of sommige VIB's zijn verouderd",
                    },
                    {"value": "no", "label": "Nee — VIB's ontbreken of geen stoffenregister"},
                ],
            },
            {
                "id": "haz2-categories",
                "label": "Welke gevaarcategorieën zijn aanwezig op de werkplek? (meerdere mogelijk)",
                "type": QuestionType.MULTI_CHOICE,
                "help_text": "Raadpleeg VIB-rubriek 2 voor H-zinnen. CMR 1A/1B: H340/H350/H360 resp. H341/H351/H361.",
                "options": [
                    {"value": "cmr-1a", "label": "CMR categorie 1A (H340/H350/H360) — bewezen carcinogeen/mutageen/reproductietoxisch"},
                    {"value": "cmr-1b", "label": "CMR categorie 1B (H341/H351/H361) — vermoedelijk carcinogeen/mutageen/reproductietoxisch"},
                    {"value": "cmr-2", "label": "CMR categorie 2 — verdacht"},
                    {"value": "sensitizing", "label": "Sensibiliserend (H317 huidsensibilisering / H334 luchtwegsensibilisering)"},
                    {"value": "toxic", "label": "Acuut toxisch (H300/H310/H330)"},
                    {"value": "irritant", "label": "Irriterend of huidcorrosief (H314/H315/H319)"},
                    {"value": "none", "label": "Geen van bovenstaande / onbekend"},
                ],
            },
            {
                "id": "haz2-substitution",
                "label": "Is vervanging door een minder gevaarlijke stof of werkwijze onderzocht en gedocumenteerd?",
                "type": QuestionType.SINGLE_CHOICE,
                "help_text": "Voor CMR 1A/1B geldt een wettelijke vervangingsplicht (art. 4.17 Arbobesluit). Leg de afweging altijd schriftelijk vast.",
                "visible_when": HAS_CMR,
                "options": [
                    {"value": "yes", "label": "Ja — onderzocht, gedocumenteerd en aantoonbaar niet haalbaar"},
                    {
                        "value": "partial",
                        "label": "Gedeeltelijk — onderzoek is gestart maar nog niet afgerond of vastgelegd",
                    },
                    {"value": "no", "label": "Nee — nog niet onderzocht"},
                ],
            },
        ],
    },

    # ── Stap 3: Blootstellingsbeoordeling ─────────────────────────────────────
    {
        "id": "haz-step3-exposure",
        "title": "Blootstellingsbeoordeling",
        "description": "Stel vast hoe de blootstelling is beoordeeld en wat de uitkomst is ten opzichte van de geldende grenswaarden (OELV's).",
        "questions": [
            {
                "id": "haz3-quantified",
                "label": "Is de blootstelling kwantitatief bepaald?",
                "type": QuestionType.SINGLE_CHOICE,
                "help_text": "Pas altijd de gelaagde aanpak toe: kwalitatief → rekenmodel → meting. Wijst de kwalitatieve beoordeling op laag risico, dan is verdere kwantificering niet altijd nodig.",
                "options": [
                    {"value": "yes-nen689", "label": "Ja — volledige meetcampagne conform NEN-EN 689"},
                    {"value": "yes-rekentool", "label": "Ja — rekenmodel (Stoffenmanager, ECETOC TRA, ART)"},
                    {"value": "yes-indicative", "label": "Ja — oriënterende meting (niet conform NEN-EN 689)"},
                    {"value": "no-qualitative", "label": "Nee — alleen kwalitatieve beoordeling gedaan"},
                    {"value": "no-none", "label": "Nee — geen beoordeling uitgevoerd"},
                ],
            },
            {
                "id": "haz3-process-type",
                "label": "Wat is het type werkproces waarbij blootstelling optreedt?",
                "type": QuestionType.SINGLE_CHOICE,
                "help_text": "Open processen met hoge emissie zijn een sterke indicator voor hoge blootstelling als er geen adequate beheersmaatregelen zijn.",
                "visible_when": not_(IS_QUANTIFIED),
                "options": [
                    {"value": "closed", "label": "Gesloten systeem — stof komt niet vrij"},
                    {"value": "low-emission", "label": "Open proces met lage emissie (kleine hoeveelheden, laag dampspanning)"},
                    {"value": "high-emission", "label": "Open proces met hoge emissie (spuiten, gieten, slijpen, grote oppervlakken)"},
                    {"value": "unknown", "label": "Onbekend"},
                ],
            },
            {
                "id": "haz3-oelv-result",
                "label": "Wat is de uitkomst van de blootstellingsbeoordeling t.o.v. de grenswaarde (OELV)?",
                "type": QuestionType.SINGLE_CHOICE,
                "help_text": "NEN-EN 689: statistische toets op overschrijdingskans (Pe < 5%). Bij rekenmodellen: vergelijk modeluitkomst direct met de OELV.",
                "visible_when": IS_QUANTIFIED,
                "options": [
                    {"value": "below-10pct", "label": "< 10% van de OELV — verwaarloosbaar risico"},
                    {"value": "10-50pct", "label": "10 – 50% van de OELV — laag risico, monitoring aanbevolen"},
                    {"value": "50-100pct", "label": "50 – 100% van de OELV — aandacht vereist"},
                    {"value": "above-oel", "label": "> 100% van de OELV (overschrijding) — directe maatregelen verplicht"},
                    {"value": "unknown", "label": "Nog niet bepaald"},
                ],
            },
        ],
    },

    # ── Stap 4: Huidige beheersmaatregelen ────────────────────────────────────
    {
        "id": "haz-step4-controls",
        "title": "Huidige beheersmaatregelen",
        "description": "Breng in kaart welke beheersmaatregelen al aanwezig zijn, conform de Arbeidshygiënische Strategie (AHS).",
        "questions": [
            {
                "id": "haz4-technical",
                "label": "Welke technische maatregelen zijn aanwezig? (meerdere mogelijk)",
                "type": QuestionType.MULTI_CHOICE,
                "options": [
                    {"value": "closed-system", "label": "Gesloten of ingekapseld systeem"},
                    {"value": "lev", "label": "Lokale afzuiging (LEV) direct bij de bron"},
                    {"value": "general-ventilation", "label": "Algemene verdunningsventilatie (als aanvulling)"},
                    {"value": "wet-methods", "label": "Nat werken of stofbindende middelen"},
                    {"value": "mechanisation", "label": "Mechanische verwerking i.p.v. handmatig"},
                    {"value": "none", "label": "Geen technische maatregelen aanwezig"},
                ],
            },
            {
                "id": "haz4-lev-inspected",
                "label": "Is de LEV-installatie periodiek gekeurd op effectiviteit?",
                "type": QuestionType.SINGLE_CHOICE,
                "help_text": "LEV dient minimaal jaarlijks gekeurd te worden. Een ongekeurde afzuiging geeft een vals gevoel van veiligheid.",
                "visible_when": includes("haz4-technical", "lev"),
                "options": [
                    {"value": "yes-recent", "label": "Ja — gekeurd en goedgekeurd, rapport aanwezig"},
                    {"value": "yes-outdated", "label": "Ja — maar de laatste keuring is meer dan 1 jaar geleden"},
                    {"value": "no", "label": "Nee — nooit gekeurd of geen keuringsrapport aanwezig"},
                ],
            },
            {
                "id": "haz4-ppe",
                "label": "Zijn PBM beschikbaar als aanvullende maatregel? (meerdere mogelijk)",
                "type": QuestionType.MULTI_CHOICE,
                "options": [
                    {"value": "respirator", "label": "Ademhalingsbescherming van het juiste type en filterklasse"},
                    {"value": "gloves", "label": "Handschoenen met gecontroleerde chemische bestendigheid"},
                    {"value": "eye-clothing", "label": "Oog- en/of huidbescherming (bril, spatbril, beschermende kleding)"},
                    {"value": "usage-monitored", "label": "Gebruik van PBM wordt aantoonbaar gemonitord"},
                    {"value": "none", "label": "Geen PBM aanwezig of van toepassing"},
                ],
            },
            {
                "id": "haz4-ppe-only",
                "label": "Zijn PBM de enige maatregel (zonder onderliggende technische of organisatorische maatregelen)?",
                "type": QuestionType.SINGLE_CHOICE,
                "help_text": "Conform de AHS zijn PBM altijd een aanvulling, nooit de primaire maatregel. PBM als enige maatregel is een overtreding van art. 4.4 Arbobesluit.",
                "visible_when": PPE_BESIDES_NONE,
                "options": [
                    {"value": "yes", "label": "Ja — PBM zijn de enige maatregel"},
                    {
                        "value": "no",
                        "label": "Nee — er zijn ook technische en/of organisatorische maatregelen getroffen",
                    },
                ],
            },
            {
                "id": "haz4-training",
                "label": "Zijn medewerkers aantoonbaar geïnformeerd over de risico's en correct gebruik van PBM?",
                "type": QuestionType.SINGLE_CHOICE,
                "help_text": "\"Aantoonbaar\" betekent dat u bij een inspectie kunt laten zien dat medewerkers zijn geïnstrueerd (handtekeningenlijst, e-learning logboek, opleidingsregistratie).",
                "options": [
                    {"value": "yes-periodic", "label": "Ja — aantoonbaar en periodiek herhaald"},
                    {"value": "yes-once", "label": "Ja — eenmalig bij indiensttreding, niet periodiek herhaald"},
                    {"value": "no", "label": "Nee — geen aantoonbare instructie gegeven"},
                ],
            },
        ],
    },

    # ── Stap 5: CMR-aanvullende maatregelen (alleen zichtbaar bij CMR 1A/1B) ──
    {
        "id": "haz-step5-cmr",
        "title": "CMR-aanvullende maatregelen",
        "description": "Voor CMR-stoffen categorie 1A en 1B gelden wettelijk verplichte aanvullende maatregelen. Controleer of deze zijn ingericht.",
        "visible_when": HAS_CMR,
        "questions": [
            {
                "id": "haz5-closed-system",
                "label": "Is een gesloten systeem of maximale insluiting toegepast (wettelijk verplicht als technisch haalbaar)?",
                "type": QuestionType.SINGLE_CHOICE,
                "help_text": "Art. 4.18 Arbobesluit: bij CMR 1A/1B moet een gesloten systeem worden gebruikt tenzij dit technisch niet haalbaar is. Leg dit dan schriftelijk onderbouwd vast.",
                "options": [
                    {"value": "yes", "label": "Ja — gesloten systeem is aanwezig en wordt gebruikt"},
                    {
                        "value": "no-motivated",
                        "label": "Nee — open proces, maar dit is schriftelijk onderbouwd als technisch niet haalbaar",
                    },
                    {"value": "no", "label": "Nee — open proces zonder schriftelijke onderbouwing"},
                ],
            },
            {
                "id": "haz5-register",
                "label": "Is er een blootstellingsregister aangelegd met de gegevens van alle blootgestelde medewerkers?",
                "type": QuestionType.SINGLE_CHOICE,
                "help_text": "Art. 4.15 Arbobesluit: het register moet minimaal 40 jaar na de laatste blootstelling bewaard blijven.",
                "options": [
                    {"value": "yes", "label": "Ja — register is aanwezig, actueel en veilig bewaard (40-jaarstermijn geborgd)"},
                    {"value": "partial", "label": "Gedeeltelijk — register bestaat maar is niet compleet of bewaartermijn is niet geborgd"},
                    {"value": "no", "label": "Nee — register ontbreekt"},
                ],
            },
            {
                "id": "haz5-medical",
                "label": "Worden blootgestelde medewerkers periodiek medisch onderzocht via de bedrijfsarts?",
                "type": QuestionType.SINGLE_CHOICE,
                "help_text": "Art. 4.10a Arbobesluit: periodiek medisch onderzoek (PAGO/PMO) is verplicht bij CMR 1A/1B. Medewerkers hebben recht op dit onderzoek.",
                "options": [
                    {"value": "yes", "label": "Ja — periodiek PMO/PAGO wordt aangeboden en geregistreerd"},
                    {"value": "partial", "label": "Gedeeltelijk — niet voor alle blootgestelde medewerkers"},
                    {"value": "no", "label": "Nee — geen medisch toezicht ingericht"},
                ],
            },
        ],
    },

    # ── Stap 6: Documentatie en borging ──────────────────────────────────────
    {
        "id": "haz-step6-documentation",
        "title": "Documentatie en borging",
        "description": "Controleer of de risicobeoordeling is vastgelegd, verbetermaatregelen zijn geprioriteerd en de herbeoordeling is geborgd.",
        "questions": [
            {
                "id": "haz6-action-plan",
                "label": "Zijn de verbetermaatregelen uit de risicobeoordeling opgenomen in een plan van aanpak met verantwoordelijke, prioritering en uitvoertermijn?",
                "type": QuestionType.SINGLE_CHOICE,
                "options": [
                    {"value": "yes", "label": "Ja — plan van aanpak is actueel en wordt bijgehouden"},
                    {"value": "partial", "label": "Gedeeltelijk — plan bestaat maar is niet compleet of niet actueel"},
                    {"value": "no", "label": "Nee — plan van aanpak ontbreekt"},
                ],
            },
            {
                "id": "haz6-review",
                "label": "Is er een afspraak gemaakt over de periodieke herbeoordeling van de blootstellingssituatie?",
                "type": QuestionType.SINGLE_CHOICE,
                "help_text": "Triggercriteria voor vervroegde herbeoordeling: nieuwe stof, proceswijziging, gewijzigde OELV, nieuwe toxicologische inzichten, of signalen van gezondheidsklachten.",
                "options": [
                    {
                        "value": "yes",
                        "label": "Ja — herbeoordelingstermijn vastgelegd (max. 5 jaar) én triggercriteria beschreven",
                    },
                    {"value": "partial", "label": "Gedeeltelijk — termijn of triggercriteria ontbreekt"},
                    {"value": "no", "label": "Nee — geen herbeoordeling gepland"},
                ],
            },
            {
                "id": "haz6-docs",
                "label": "Zijn meetrapporten, blootstellingsbeoordelingen en VIB's gedocumenteerd en toegankelijk conform wettelijke bewaartermijnen?",
                "type": QuestionType.SINGLE_CHOICE,
                "help_text": "CMR-documenten: minimaal 40 jaar. Overige gevaarlijke stoffen: minimaal 5 jaar.",
                "options": [
                    {"value": "yes", "label": "Ja — centraal opgeslagen, toegankelijk en conform bewaartermijnen"},
                    {"value": "partial", "label": "Gedeeltelijk — niet alle documenten beschikbaar of bewaartermijnen niet geborgd"},
                    {"value": "no", "label": "Nee — documentatie onvolledig of bewaartermijnen niet geborgd"},
                ],
            },
        ],
    },
]

# Declared option values per choice question, and the multi-choice subset
OPTION_VALUES = {
    question["id"]: tuple(option["value"] for option in question["options"])
    for step in STEPS
    for question in step["questions"]
    if question["type"] is not QuestionType.FREE_TEXT
}
MULTI_CHOICE_QUESTIONS = frozenset(
    question["id"]
    for step in STEPS
    for question in step["questions"]
    if question["type"] is QuestionType.MULTI_CHOICE
)

# ─── Outcome tables ───────────────────────────────────────────────────────────
# Each outcome holds a finding, optionally a recommendation (priority is
# assigned when emitted) and optionally a data gap.

RIE_OUTCOMES = {
    "no": {
        "finding": {
            "topic": "RI&E",
            "level": RiskLevel.HIGH,
            "summary": "Risicobeoordeling gevaarlijke stoffen ontbreekt in de RI&E.",
            "legal_basis": "Art. 5 Arbowet",
        },
        "recommendation": {
            "stage": "Documentatie",
            "action": "Neem de risicobeoordeling gevaarlijke stoffen op in de RI&E.",
            "rationale": "Wettelijke verplichting (art. 5 Arbowet). Bij een inspectie levert dit direct een boete op.",
            "deadline": "3 maanden",
            "legal_basis": "Art. 5 Arbowet",
        },
    },
    "partial": {
        "finding": {
            "topic": "RI&E",
            "level": RiskLevel.MEDIUM,
            "summary": "RI&E is niet volledig of niet actueel voor gevaarlijke stoffen.",
            "legal_basis": "Art. 5 Arbowet",
        },
        "recommendation": {
            "stage": "Documentatie",
            "action": "Actualiseer de RI&E zodat alle gevaarlijke stoffen en blootstellingsituaties zijn opgenomen.",
            "rationale": "Onvolledige RI&E voldoet niet aan wettelijke verplichtingen.",
            "deadline": "6 maanden",
            "legal_basis": "Art. 5 Arbowet",
        },
    },
}

SDS_OUTCOMES = {
    "no": {
        "finding": {
            "topic": "Stoffenregister & SDS",
            "level": RiskLevel.HIGH,
            "summary": "Veiligheidsinformatiebladen ontbreken of er is geen stoffenregister.",
            "legal_basis": "Art. 4.2 Arbobesluit; REACH Verordening (EG) 1907/2006",
        },
        "recommendation": {
            "stage": "Stap 1 — Inventarisatie",
            "action": "Stel voor elke gevaarlijke stof een actueel VIB op en leg een compleet stoffenregister aan.",
            "rationale": "Zonder SDS en register kunt u de risico's niet beoordelen en niet aantonen dat u aan uw zorgplicht voldoet.",
            "deadline": "1 maand",
            "legal_basis": "Art. 4.2 Arbobesluit",
        },
    },
    "partial": {
        "finding": {
            "topic": "Stoffenregister & SDS",
            "level": RiskLevel.MEDIUM,
            "summary": "Niet voor alle stoffen is een actueel VIB beschikbaar of het stoffenregister is onvolledig.",
            "legal_basis": "Art. 4.2 Arbobesluit",
        },
        "recommendation": {
            "stage": "Stap 1 — Inventarisatie",
            "action": "Compleet het stoffenregister en vernieuw verouderde VIB's.",
            "rationale": "Verouderde VIB's bevatten mogelijk onjuiste grenswaarden en PBM-adviezen.",
            "deadline": "3 maanden",
            "legal_basis": "Art. 4.2 Arbobesluit",
        },
    },
}

SUBSTITUTION_OUTCOMES = {
    "no": {
        "finding": {
            "topic": "CMR — Vervangingsplicht",
            "level": RiskLevel.HIGH,
            "summary": "Vervanging van CMR 1A/1B-stoffen is niet onderzocht of niet gedocumenteerd.",
            "legal_basis": "Art. 4.17 Arbobesluit",
        },
        "recommendation": {
            "stage": "Stap 1 — Eliminatie/Vervanging",
            "action": "Onderzoek of CMR 1A/1B-stoffen vervangen kunnen worden door minder gevaarlijke alternatieven en leg de afweging schriftelijk vast.",
            "rationale": "De vervangingsplicht is wettelijk verankerd. Zonder gedocumenteerde afweging is er sprake van een overtreding.",
            "deadline": "2 maanden",
            "legal_basis": "Art. 4.17 Arbobesluit",
        },
    },
}

EXPOSURE_REGISTER_OUTCOMES = {
    "no": {
        "finding": {
            "topic": "CMR — Blootstellingsregister",
            "level": RiskLevel.CRITICAL,
            "summary": "Blootstellingsregister voor CMR 1A/1B-stoffen ontbreekt (40-jaar bewaartermijn).",
            "legal_basis": "Art. 4.15 Arbobesluit",
        },
        "recommendation": {
            "stage": "Documentatie",
            "action": "Leg onmiddellijk een blootstellingsregister aan voor alle medewerkers die worden blootgesteld aan CMR 1A/1B-stoffen.",
            "rationale": "Wettelijk verplicht. Latente ziekten (kanker) kunnen decennia later optreden. Bewaartermijn: 40 jaar.",
            "deadline": "1 maand",
            "legal_basis": "Art. 4.15 Arbobesluit",
        },
    },
    "partial": {
        "finding": {
            "topic": "CMR — Blootstellingsregister",
            "level": RiskLevel.HIGH,
            "summary": "Blootstellingsregister is onvolledig of de 40-jaar bewaartermijn is niet geborgd.",
            "legal_basis": "Art. 4.15 Arbobesluit",
        },
    },
}

MEDICAL_OUTCOMES = {
    "no": {
        "finding": {
            "topic": "CMR — Medisch toezicht",
            "level": RiskLevel.HIGH,
            "summary": "Geen periodiek medisch onderzoek (PMO/PAGO) ingericht voor medewerkers die worden blootgesteld aan CMR 1A/1B-stoffen.",
            "legal_basis": "Art. 4.10a Arbobesluit",
        },
        "recommendation": {
            "stage": "Stap 3 — Organisatie",
            "action": "Regel periodiek medisch toezicht via de bedrijfsarts voor alle medewerkers blootgesteld aan CMR 1A/1B.",
            "rationale": "Wettelijk verplicht. Vroege detectie van gezondheidsschade is alleen mogelijk via regelmatige monitoring.",
            "deadline": "3 maanden",
            "legal_basis": "Art. 4.10a Arbobesluit",
        },
    },
    "partial": {
        "finding": {
            "topic": "CMR — Medisch toezicht",
            "level": RiskLevel.MEDIUM,
            "summary": "Medisch toezicht is niet voor alle blootgestelde medewerkers ingericht.",
            "legal_basis": "Art. 4.10a Arbobesluit",
        },
    },
}

CLOSED_SYSTEM_OUTCOMES = {
    "no": {
        "finding": {
            "topic": "CMR — Gesloten systeem",
            "level": RiskLevel.CRITICAL,
            "summary": "Open proces met CMR 1A/1B-stoffen zonder schriftelijke onderbouwing dat gesloten systeem niet haalbaar is.",
            "legal_basis": "Art. 4.18 Arbobesluit",
        },
        "recommendation": {
            "stage": "Stap 2 — Techniek",
            "action": "Pas een gesloten systeem toe of onderbouw schriftelijk waarom dit technisch niet haalbaar is.",
            "rationale": "Wettelijk verplicht bij CMR 1A/1B. Zonder onderbouwing is er sprake van een directe overtreding.",
            "deadline": "1 maand",
            "legal_basis": "Art. 4.18 Arbobesluit",
        },
    },
}

OELV_OUTCOMES = {
    "above-oel": {
        "finding": {
            "topic": "Blootstelling",
            "level": RiskLevel.CRITICAL,
            "summary": "Gemeten blootstelling overschrijdt de grenswaarde (OELV > 100%).",
            "detail": "Directe maatregelen zijn wettelijk verplicht.",
            "legal_basis": "Art. 4.3 Arbobesluit",
        },
        "recommendation": {
            "stage": "Stap 2 — Techniek",
            "action": "Tref onmiddellijk technische maatregelen om de blootstelling onder de OELV te brengen. Stop de werkzaamheden als dit niet direct mogelijk is.",
            "rationale": "Overschrijding van de OELV is een directe wettelijke overtreding. Medewerkers lopen acuut gezondheidsrisico.",
            "deadline": "Onmiddellijk",
            "legal_basis": "Art. 4.3 Arbobesluit",
        },
    },
    "50-100pct": {
        "finding": {
            "topic": "Blootstelling",
            "level": RiskLevel.HIGH,
            "summary": "Blootstelling ligt tussen 50% en 100% van de OELV — verbetermaatregelen zijn noodzakelijk.",
            "legal_basis": "Art. 4.3 Arbobesluit",
        },
        "recommendation": {
            "stage": "Stap 2 — Techniek",
            "action": "Onderzoek aanvullende technische maatregelen om de blootstelling verder te reduceren.",
            "rationale": "Blootstelling boven 50% OELV vereist concrete verbetermaatregelen conform de AHS.",
            "deadline": "3 maanden",
            "legal_basis": "Art. 4.3 Arbobesluit",
        },
    },
    "10-50pct": {
        "finding": {
            "topic": "Blootstelling",
            "level": RiskLevel.MEDIUM,
            "summary": "Blootstelling ligt tussen 10% en 50% van de OELV — monitoring aanbevolen.",
        },
        "recommendation": {
            "stage": "Stap 3 — Organisatie",
            "action": "Leg een monitoringsplan vast en voer periodiek hermetingen uit.",
            "rationale": "Blootstelling in dit bereik vereist bewaking om verdere stijging tijdig te signaleren.",
            "deadline": "6 maanden",
        },
    },
    "below-10pct": {
        "finding": {
            "topic": "Blootstelling",
            "level": RiskLevel.LOW,
            "summary": "Blootstelling is duidelijk lager dan de OELV (< 10%) — verwaarloosbaar risico.",
        },
    },
}

_HIGH_EMISSION_OUTCOME = {
    "finding": {
        "topic": "Blootstelling",
        "level": RiskLevel.HIGH,
        "summary": "Blootstelling is niet gekwantificeerd terwijl het procestype een significant emissierisico kent.",
    },
    "recommendation": {
        "stage": "Stap 2 — Techniek",
        "action": "Voer een kwantitatieve blootstellingsbeoordeling uit (rekenmodel of meting conform NEN-EN 689).",
        "rationale": "Zonder kwantificering is niet aantoonbaar dat de blootstelling acceptabel is.",
        "deadline": "3 maanden",
        "legal_basis": "Art. 4.3 Arbobesluit",
    },
    "data_gap": "Kwantitatieve blootstellingsgegevens ontbreken voor een hoog-emissieproces.",
}

PROCESS_TYPE_OUTCOMES = {
    "high-emission": _HIGH_EMISSION_OUTCOME,
    "unknown": _HIGH_EMISSION_OUTCOME,
    "low-emission": {
        "finding": {
            "topic": "Blootstelling",
            "level": RiskLevel.MEDIUM,
            "summary": "Blootstelling is niet gekwantificeerd. Op basis van procestype wordt een lage emissie verwacht.",
        },
        "data_gap": "Kwantitatieve blootstellingsgegevens ontbreken — een kwalitatieve beoordeling is aanwezig.",
    },
    "closed": {
        "finding": {
            "topic": "Blootstelling",
            "level": RiskLevel.LOW,
            "summary": "Gesloten systeem — blootstelling is inherent laag.",
        },
    },
}

NO_ASSESSMENT_OUTCOME = {
    "finding": {
        "topic": "Blootstelling",
        "level": RiskLevel.HIGH,
        "summary": "Er is geen blootstellingsbeoordeling uitgevoerd.",
        "legal_basis": "Art. 4.3 Arbobesluit",
    },
    "recommendation": {
        "stage": "Stap 2 — Techniek",
        "action": "Start direct met een blootstellingsbeoordeling (minimaal kwalitatief, gevolgd door kwantificering waar nodig).",
        "rationale": "Zonder beoordeling kunt u niet bepalen of medewerkers adequaat worden beschermd.",
        "deadline": "2 maanden",
        "legal_basis": "Art. 4.3 Arbobesluit",
    },
    "data_gap": "Geen blootstellingsbeoordeling uitgevoerd.",
}

PPE_ONLY_OUTCOMES = {
    "yes": {
        "finding": {
            "topic": "Beheersmaatregelen (AHS)",
            "level": RiskLevel.HIGH,
            "summary": "PBM zijn de enige maatregel — schending van de Arbeidshygiënische Strategie.",
            "detail": "Technische en organisatorische maatregelen gaan voor PBM conform de AHS.",
            "legal_basis": "Art. 4.4 Arbobesluit",
        },
        "recommendation": {
            "stage": "Stap 2 — Techniek",
            "action": "Implementeer technische beheersmaatregelen (bijv. LEV, gesloten systeem). PBM mogen uitsluitend als aanvulling worden ingezet.",
            "rationale": "PBM als enige maatregel is een directe schending van de AHS en art. 4.4 Arbobesluit.",
            "deadline": "3 maanden",
            "legal_basis": "Art. 4.4 Arbobesluit",
        },
    },
}

LEV_INSPECTION_OUTCOMES = {
    "no": {
        "finding": {
            "topic": "LEV-keuring",
            "level": RiskLevel.HIGH,
            "summary": "LEV is nooit gekeurd of keuringsrapport ontbreekt.",
            "legal_basis": "Art. 4.5 Arbobesluit",
        },
        "recommendation": {
            "stage": "Stap 2 — Techniek",
            "action": "Laat de LEV direct keuren op effectiviteit door een deskundige.",
            "rationale": "Een ongekeurde afzuiging kan onvoldoende bescherming bieden zonder dat dit zichtbaar is.",
            "deadline": "1 maand",
            "legal_basis": "Art. 4.5 Arbobesluit",
        },
    },
    "yes-outdated": {
        "finding": {
            "topic": "LEV-keuring",
            "level": RiskLevel.MEDIUM,
            "summary": "LEV-keuring is meer dan 1 jaar geleden — periodieke keuring is vereist.",
            "legal_basis": "Art. 4.5 Arbobesluit",
        },
        "recommendation": {
            "stage": "Stap 2 — Techniek",
            "action": "Plan een nieuwe LEV-keuring in.",
            "rationale": "LEV dient minimaal jaarlijks gekeurd te worden op effectiviteit.",
            "deadline": "2 maanden",
            "legal_basis": "Art. 4.5 Arbobesluit",
        },
    },
}

TRAINING_OUTCOMES = {
    "no": {
        "finding": {
            "topic": "Voorlichting & instructie",
            "level": RiskLevel.MEDIUM,
            "summary": "Medewerkers zijn niet aantoonbaar geïnstrueerd over risico's en PBM-gebruik.",
            "legal_basis": "Art. 8 Arbowet",
        },
        "recommendation": {
            "stage": "Stap 3 — Organisatie",
            "action": "Geef medewerkers aantoonbare voorlichting over gevaarlijke stoffen en correct PBM-gebruik. Registreer de deelname.",
            "rationale": "Wettelijk verplicht (art. 8 Arbowet). Medewerkers moeten de risico's kennen om zich te kunnen beschermen.",
            "deadline": "3 maanden",
            "legal_basis": "Art. 8 Arbowet",
        },
    },
    "yes-once": {
        "finding": {
            "topic": "Voorlichting & instructie",
            "level": RiskLevel.MEDIUM,
            "summary": "Instructie is eenmalig gegeven bij indiensttreding, maar niet periodiek herhaald.",
            "legal_basis": "Art. 8 Arbowet",
        },
        "recommendation": {
            "stage": "Stap 3 — Organisatie",
            "action": "Stel een periodiek herhalingsschema in voor voorlichting over gevaarlijke stoffen.",
            "rationale": "Kennis neemt af en situaties veranderen. Periodieke herhaling houdt medewerkers scherp.",
            "deadline": "6 maanden",
            "legal_basis": "Art. 8 Arbowet",
        },
    },
}

ACTION_PLAN_OUTCOMES = {
    "no": {
        "finding": {
            "topic": "Plan van aanpak",
            "level": RiskLevel.MEDIUM,
            "summary": "Plan van aanpak ontbreekt voor gevaarlijke stoffen.",
            "legal_basis": "Art. 5 lid 3 Arbowet",
        },
        "recommendation": {
            "stage": "Documentatie",
            "action": "Stel een plan van aanpak op met prioritering, verantwoordelijken en uitvoertermijnen voor alle gevonden risico's.",
            "rationale": "Een plan van aanpak is wettelijk verplicht en nodig om structureel verbetering te boeken.",
            "deadline": "2 maanden",
            "legal_basis": "Art. 5 lid 3 Arbowet",
        },
    },
}

NO_TECHNICAL_MEASURES_OUTCOME = {
    "finding": {
        "topic": "Beheersmaatregelen (AHS)",
        "level": RiskLevel.HIGH,
        "summary": "Geen technische beheersmaatregelen aanwezig.",
        "legal_basis": "Art. 4.4 Arbobesluit",
    },
    "recommendation": {
        "stage": "Stap 2 — Techniek",
        "action": "Onderzoek en implementeer technische maatregelen conform de AHS (bronbeheersing, LEV, gesloten systeem).",
        "rationale": "Technische maatregelen zijn het primaire middel conform de AHS. PBM zijn onvoldoende als enige bescherming.",
        "deadline": "3 maanden",
        "legal_basis": "Art. 4.4 Arbobesluit",
    },
}

BASELINE_FINDING = {
    "topic": "Gevaarlijke stoffen",
    "level": RiskLevel.LOW,
    "summary": "Op basis van de inventarisatie zijn geen aanwijzingen voor onbeheerste blootstelling aan gevaarlijke stoffen vastgesteld.",
    "detail": "Herhaal de beoordeling bij introductie van nieuwe stoffen of gewijzigde werkprocessen.",
}

# Rule groups in evaluation order: (question id, outcomes by answer value)
GENERAL_RULES = [
    ("haz1-rie", RIE_OUTCOMES),
    ("haz2-sds", SDS_OUTCOMES),
]

CMR_RULES = [
    ("haz2-substitution", SUBSTITUTION_OUTCOMES),
    ("haz5-register", EXPOSURE_REGISTER_OUTCOMES),
    ("haz5-medical", MEDICAL_OUTCOMES),
    ("haz5-closed-system", CLOSED_SYSTEM_OUTCOMES),
]

CONTROL_RULES = [
    ("haz4-ppe-only", PPE_ONLY_OUTCOMES),
    ("haz4-lev-inspected", LEV_INSPECTION_OUTCOMES),
    ("haz4-training", TRAINING_OUTCOMES),
    ("haz6-action-plan", ACTION_PLAN_OUTCOMES),
]

# Missing information categories: (question ids, data gap)
INFORMATION_CATEGORIES = [
    (("haz1-rie",), "Status van de RI&E voor gevaarlijke stoffen niet opgegeven."),
    (("haz2-sds",), "Beschikbaarheid van VIB's en stoffenregister niet opgegeven."),
    (("haz2-categories",), "Gevarencategorieën (GHS/CMR) van de stoffen niet geïnventariseerd."),
    (("haz3-quantified",), "Blootstellingsbeoordeling niet opgegeven."),
    (("haz4-technical",), "Technische beheersmaatregelen niet geïnventariseerd."),
]
CMR_CATEGORY = (
    ("haz5-closed-system", "haz5-register", "haz5-medical"),
    "Aanvullende CMR-maatregelen (gesloten systeem, blootstellingsregister, medisch toezicht) niet volledig ingevuld.",
)
GAP_OELV_RESULT = "Resultaat van de kwantitatieve blootstellingsbeoordeling niet vastgelegd."
GAP_PROCESS_TYPE = "Procestype (emissiekarakter) niet opgegeven."


def _apply(builder: VerdictBuilder, priorities: Iterator[int], outcome: dict) -> None:
    builder.add_finding(**outcome["finding"])
    if "recommendation" in outcome:
        builder.add_recommendation(priority=next(priorities), **outcome["recommendation"])
    if "data_gap" in outcome:
        builder.add_data_gap(outcome["data_gap"])


def _apply_rules(
    builder: VerdictBuilder,
    priorities: Iterator[int],
    answers: AnswerSet,
    rules: list[tuple[str, dict]],
) -> None:
    for question_id, outcomes in rules:
        outcome = outcomes.get(get_choice(answers, question_id))
        if outcome is not None:
            _apply(builder, priorities, outcome)


def _has_usable_answer(answers: AnswerSet, question_id: str) -> bool:
    """Declared option(s) selected; wrong shapes and unknown values count as missing."""
    allowed = OPTION_VALUES[question_id]
    if question_id in MULTI_CHOICE_QUESTIONS:
        return len(get_choices(answers, question_id, allowed)) > 0
    return get_choice(answers, question_id, allowed) is not None


def _add_missing_categories(builder: VerdictBuilder, answers: AnswerSet, has_cmr: bool) -> None:
    categories = list(INFORMATION_CATEGORIES)
    if has_cmr:
        categories.append(CMR_CATEGORY)
    for question_ids, gap in categories:
        if not all(_has_usable_answer(answers, qid) for qid in question_ids):
            builder.add_data_gap(gap)


def _assess_exposure(builder: VerdictBuilder, priorities: Iterator[int], answers: AnswerSet) -> None:
    if IS_QUANTIFIED.evaluate(answers):
        result = get_choice(answers, "haz3-oelv-result")
        outcome = OELV_OUTCOMES.get(result)
        if outcome is None:
            builder.add_data_gap(GAP_OELV_RESULT)
        else:
            _apply(builder, priorities, outcome)
        return

    outcome = PROCESS_TYPE_OUTCOMES.get(get_choice(answers, "haz3-process-type"))
    if outcome is not None:
        _apply(builder, priorities, outcome)
    elif get_choice(answers, "haz3-quantified") == "no-none":
        _apply(builder, priorities, NO_ASSESSMENT_OUTCOME)
    elif get_choice(answers, "haz3-quantified") == "no-qualitative":
        builder.add_data_gap(GAP_PROCESS_TYPE)


def assess_risk(answers: AnswerSet) -> Verdict:
    """Assess hazardous substance handling from the collected answers.

    Answers of questions that are currently hidden still count, except for
    the CMR and exposure-result rules, which check the same conditions that
    drive visibility.

    Args:
        answers: Raw answer set; it is only read

    Returns:
        Verdict whose overall level is the most severe finding, LOW when no
        rule fired
    """
    builder = VerdictBuilder()
    priorities = count(1)
    has_cmr = HAS_CMR.evaluate(answers)

    _add_missing_categories(builder, answers, has_cmr)

    _apply_rules(builder, priorities, answers, GENERAL_RULES)
    if has_cmr:
        _apply_rules(builder, priorities, answers, CMR_RULES)
    _assess_exposure(builder, priorities, answers)
    _apply_rules(builder, priorities, answers, CONTROL_RULES)

    if "none" in get_choices(answers, "haz4-technical"):
        _apply(builder, priorities, NO_TECHNICAL_MEASURES_OUTCOME)

    if not builder.has_findings:
        builder.add_finding(**BASELINE_FINDING)

    return builder.build()
