"""Read-only reference tables: legal articles and abbreviations.

Loaded once at import. Lookups return the shared immutable objects.
"""

from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class LegalArticle:
    """Citation shown next to a question or finding."""

    ref: str
    title: str
    text: str


_LEGAL_ARTICLES = {
    # ── Arbobesluit Hoofdstuk 6, Afdeling 3 — Lawaai ────────────────────────────
    "Art. 6.5": {
        "title": "Arbobesluit art. 6.5 — Beoordeling en meting",
        "text": "De werkgever beoordeelt de risico's van geluidblootstelling en laat zo nodig de blootstelling meten door een deskundige (conform NEN-EN-ISO 9612). De beoordeling wordt periodiek herhaald en in ieder geval bij wijzigingen. Resultaten worden schriftelijk gedocumenteerd.",
    },
    "Goede praktijk": {
        "title": "Goede praktijk",
        "text": "Geen wettelijke verplichting, maar aanbevolen werkwijze conform NEN-EN-ISO 9612:2025 en arbeidshygiënische beginselen.",
    },
    "Art. 6.5 lid 1": {
        "title": "Arbobesluit art. 6.5 lid 1 — Actiewaarden",
        "text": "Onderste actiewaarden (LAV): L_EX,8h = 80 dB(A) en L_p,Cpeak = 135 dB(C). Bovenste actiewaarden (UAV): L_EX,8h = 85 dB(A) en L_p,Cpeak = 137 dB(C).",
    },
    "Art. 6.5 lid 2": {
        "title": "Arbobesluit art. 6.5 lid 2 — Grenswaarden",
        "text": "Grenswaarden (GW): L_EX,8h = 87 dB(A) en L_p,Cpeak = 140 dB(C). De grenswaarden mogen nooit worden overschreden.",
    },
    "Art. 6.5 lid 3": {
        "title": "Arbobesluit art. 6.5 lid 3 — Grenswaarde met gehoorbeschermer",
        "text": "Bij het bepalen of de grenswaarden worden overschreden, wordt rekening gehouden met de demping van de gehoorbeschermer die de werknemer daadwerkelijk gebruikt. De actiewaarden worden bepaald zonder PBM.",
    },
    "Art. 6.6 lid 1": {
        "title": "Arbobesluit art. 6.6 lid 1 — Maatregelen bij actiewaarden",
        "text": "Indien de dagelijkse blootstelling de onderste actiewaarden bereikt of overschrijdt, neemt de werkgever maatregelen: (a) een programma van technische en/of organisatorische maatregelen; (b) gehoorbeschermers beschikbaar stellen; (c) geluidzones aanwijzen bij de bovenste actiewaarden.",
    },
    "Art. 6.6 lid 1a": {
        "title": "Arbobesluit art. 6.6 lid 1a — Maatregelenprogramma",
        "text": "De werkgever stelt een programma van technische en/of organisatorische maatregelen op gericht op verlaging van de geluidblootstelling. Bij de bovenste actiewaarde is daadwerkelijke uitvoering verplicht.",
    },
    "Art. 6.6 lid 1b": {
        "title": "Arbobesluit art. 6.6 lid 1b — Gehoorbeschermers",
        "text": "Boven de onderste actiewaarden: gehoorbeschermers beschikbaar stellen op verzoek van de werknemer. Boven de bovenste actiewaarden: gebruik is verplicht en de werkgever zorgt dat ze daadwerkelijk gebruikt worden.",
    },
    "Art. 6.6 lid 1b–c": {
        "title": "Arbobesluit art. 6.6 lid 1b en 1c",
        "text": "Lid 1b: verplicht gebruik gehoorbeschermers bij de bovenste actiewaarden. Lid 1c: aanwijzen van geluidzones met passende signalering; toegang voor niet-betrokkenen beperken.",
    },
    "Art. 6.6 lid 1c": {
        "title": "Arbobesluit art. 6.6 lid 1c — Geluidzone",
        "text": "Indien de bovenste actiewaarden worden overschreden wijst de werkgever de arbeidsplaatsen aan als geluidzones, voorziet deze van passende signalering en beperkt de toegang voor niet-betrokkenen.",
    },
    "Art. 6.6 lid 1–c": {
        "title": "Arbobesluit art. 6.6 lid 1 (a t/m c) — Alle verplichtingen bij actiewaarden",
        "text": "Alle verplichtingen bij de onderste en bovenste actiewaarden gelden: maatregelenprogramma (a), gehoorbescherming (b) en geluidzone-aanwijzing (c) zijn van toepassing.",
    },
    "Art. 6.6 lid 2": {
        "title": "Arbobesluit art. 6.6 lid 2 — Grenswaarde overschreden",
        "text": "Indien de blootstelling de grenswaarden overschrijdt, neemt de werkgever onmiddellijk maatregelen om de blootstelling terug te brengen tot beneden de grenswaarden. De oorzaak wordt vastgesteld en het maatregelenprogramma wordt aangepast om herhaling te voorkomen.",
    },
    "Art. 6.7": {
        "title": "Arbobesluit art. 6.7 — Arbeidsgezondheidskundig onderzoek (bij LAV)",
        "text": "Indien de dagelijkse blootstelling de onderste actiewaarden bereikt of overschrijdt, biedt de werkgever werknemers arbeidsgezondheidskundig onderzoek (audiometrie) aan door of onder toezicht van een bedrijfsarts. De werknemer beslist zelf of hij hieraan deelneemt. Bij de bovenste actiewaarden geldt de aanvullende periodieke verplichting van art. 6.10.",
    },
    "Art. 6.8": {
        "title": "Arbobesluit art. 6.8 — Voorlichting en opleiding (bij LAV)",
        "text": "Werknemers blootgesteld boven de onderste actiewaarden ontvangen voorlichting over: de aard van de risico's, de maatregelen, actie- en grenswaarden, meetresultaten, nut en gebruik van gehoorbeschermers, en indicaties voor gehooronderzoek.",
    },
    "Art. 6.9": {
        "title": "Arbobesluit art. 6.9 — Kwaliteitseisen gehoorbescherming",
        "text": "De werkgever zorgt dat de gekozen gehoorbeschermers de blootstelling bij het oor terugbrengen tot beneden de grenswaarden (87 dB(A) / 140 dB(C)). Werknemers worden geïnstrueerd over correct gebruik en onderhoud. Bij de bovenste actiewaarden zorgt de werkgever voor daadwerkelijk gebruik.",
    },
    "Art. 6.10": {
        "title": "Arbobesluit art. 6.10 — Gehooronderzoek (audiometrie)",
        "text": "Werknemers blootgesteld boven de bovenste actiewaarden hebben recht op periodiek preventief gehooronderzoek door of onder toezicht van een bedrijfsarts. Bij de onderste actiewaarden geldt dit recht indien de risicobeoordeling daartoe aanleiding geeft.",
    },
    "Art. 6.10a": {
        "title": "Arbobesluit art. 6.10a — Maatregelen na vastgesteld gehoorverlies",
        "text": "Indien een gehoorschadiging wordt vastgesteld die verband kan houden met lawaaiblootstelling, herziet de werkgever de risicobeoordeling en het maatregelenprogramma. De betrokken werknemer wordt persoonlijk geïnformeerd en zijn blootstelling wordt voortdurend bewaakt.",
    },
    "Art. 6.11": {
        "title": "Arbobesluit art. 6.11 — Informatie en instructie",
        "text": "Werknemers en hun vertegenwoordigers ontvangen informatie over de resultaten van de risicobeoordeling, de geluidmetingen, de getroffen maatregelen, de actie- en grenswaarden en de beschikbaarheid van gehooronderzoek. De informatie is actueel en begrijpelijk.",
    },

    # ── Aanvullende normen & richtlijnen ───────────────────────────────────────
    "NPR 3438": {
        "title": "NPR 3438:2007 — Concentratie en communicatie op de arbeidsplaats",
        "text": "Nederlandse praktijkrichtlijn voor geluid bij concentratie- en communicatietaken (35–80 dB(A)). Geeft activiteitspecifieke streef- en maximumniveaus: hoge concentratie (chirurgie, beleid, onderwijs) max. 45 dB(A); redelijk (beeldschermwerk, lab) max. 55 dB(A); matig (kantoor, receptie) max. 65 dB(A); laag (assemblagen, kassawerk) max. 75 dB(A); zwaar mechanisch werk max. 80 dB(A). Bij complexe communicatietaken aanvullende STI-meting aanbevolen.",
    },
    "RL SHT 2020": {
        "title": "Richtlijn Slechthorendheid en Tinnitus 2020 (NVAB)",
        "text": "Richtlijn voor bedrijfsartsen bij beoordeling van slechthorendheid en tinnitus op het werk. Tinnitusernst via Tinnitus Handicap Inventory (THI): graad 1 licht (0–16), graad 2 mild (18–36), graad 3 matig (38–56), graad 4 ernstig (58–76), graad 5 catastrofaal (78–100). Verwijscriteria naar audiologisch centrum: gehoorverlies > 35 dB of werkgerelateerde tinnitusproblematiek THI ≥ graad 3. Bij vermoede beroepsziekte: melden NCvB B001.",
    },
}

LEGAL_ARTICLES = MappingProxyType(
    {
        ref: LegalArticle(ref=ref, title=entry["title"], text=entry["text"])
        for ref, entry in _LEGAL_ARTICLES.items()
    }
)

ABBREVIATIONS = MappingProxyType({
    "OEL": "Occupational Exposure Limit — grenswaarde voor beroepsmatige blootstelling",
    "OELV": "Occupational Exposure Limit Value — grenswaarde voor beroepsmatige blootstelling",
    "TGG": "Tijdgewogen gemiddelde",
    "CLP": "Classification, Labelling and Packaging — Verordening EG 1272/2008",
    "VIB": "Veiligheidsinformatieblad",
    "SDS": "Safety Data Sheet — veiligheidsinformatieblad",
    "CMR": "Carcinogeen, Mutageen of Reproductietoxisch",
    "ATEX": "ATmosphères EXplosibles — explosieve atmosferen (Arbobesluit hfst. 3 par. 2a)",
    "LEL": "Lower Explosive Limit — laagste explosieve concentratie (% vol)",
    "UEL": "Upper Explosive Limit — hoogste explosieve concentratie (% vol)",
    "ARIE": "Aanvullende Risico-Inventarisatie en -Evaluatie — grote hoeveelheden gevaarlijke stoffen (Arbobesluit hfst. 2 afd. 2)",
    "RIE": "Risico-Inventarisatie en -Evaluatie (Arbowet art. 5)",
    "REACH": "Registration, Evaluation, Authorisation and restriction of CHemicals — Verordening EG 1907/2006",
    "IUPAC": "International Union of Pure and Applied Chemistry",
    "DNEL": "Derived No-Effect Level — grenswaarde afgeleid uit REACH-registratiedossier",
    "NLA": "NLA-handelingskader \"Werken met gevaarlijke stoffen\" (Nationaal Loket Arbodeskundigen)",
    "SEG": "Similar Exposure Group — groep medewerkers met vergelijkbare blootstelling",
    "LEV": "Lokale Exhaust Ventilatie — bronafzuiging",
    "ACH": "Air Changes per Hour — luchtverversingen per uur",
    "PPE": "Personal Protective Equipment — persoonlijke beschermingsmiddelen",
    "PBM": "Persoonlijke beschermingsmiddelen",
    "HOVd": "Hogere Veiligheidskundige (deskundigheidsniveau d)",
    # ── Geluid / NEN-EN-ISO 9612 ──────────────────────────────────────────────
    "HEG": "Homogene Blootstellingsgroep — groep medewerkers met vergelijkbare geluidblootstelling (NEN-EN-ISO 9612:2025 §7.2)",
    "LAV": "Lagere Actiewaarde geluid — 80 dB(A) dagelijks / 135 dB(C) piek — Arbobesluit art. 6.6 lid 1",
    "UAV": "Bovenste Actiewaarde geluid — 85 dB(A) dagelijks / 137 dB(C) piek — Arbobesluit art. 6.6 lid 1",
    "GW": "Grenswaarde geluid — 87 dB(A) dagelijks / 140 dB(C) piek — Arbobesluit art. 6.6 lid 2",
    "SNR": "Single Number Rating — eén-getal beschermingswaarde gehoorbeschermer (EN 352/EN 458:2016)",
    "OB": "Octaafbandanalyse — meting van het geluidniveau per octaafband (63–8000 Hz), optioneel voor EN 458:2016 methode 3",
    "APF": "Assumed Protection Factor — aangenomen beschermingsfactor in de praktijk (EN 458:2016)",
    "SLM": "Sound Level Meter — geluidniveaumeter (IEC 61672-1)",
    "NEN9612": "NEN-EN-ISO 9612:2025 — Akoestiek — Bepaling van de blootstelling aan lawaai op de werkplek (Third edition)",
    "LEX": "L_EX,8h — dagelijkse geluidblootstelling genormeerd naar 8 uur, A-gewogen (NEN-EN-ISO 9612:2025)",
    "NPR3438": "NPR 3438:2007 — Ergonomie: Geluidhinder op de arbeidsplaats — Bepaling van de mate van verstoring van communicatie en concentratie (Nederlandse Praktijkrichtlijn)",
    # ── Thermisch klimaat / klimaatonderzoek ──────────────────────────────────────
    "PMV": "Predicted Mean Vote — voorspelde gemiddelde thermische waardering (ISO 7730:2025 vgl. 1)",
    "PPD": "Predicted Percentage Dissatisfied — voorspeld percentage ontevreden medewerkers (ISO 7730:2025 vgl. 2)",
    "DR": "Draught Rate — tochtpercentage; kans op thermisch ongemak door luchtstroom (ISO 7730:2025 §6.2)",
    "WBGT": "Wet Bulb Globe Temperature — natteboltemperatuur voor hittestressscreening (ISO 7243:2017)",
    "PHS": "Predicted Heat Strain — voorspelde warmtebelasting; gedetailleerd hittestressmodel (ISO 7933:2023)",
    "IREQ": "Insulation REQuired — benodigde kledinginsulatie voor thermisch evenwicht bij koudestress (ISO 11079:2007)",
    "CAV": "Clothing Adjustment Value — kledingcorrectiewaarde voor WBGT bij beschermende kleding (ISO 7243:2017 Tabel B.2)",
    "BG": "Blootstellingsgroep — groep medewerkers met vergelijkbare thermische blootstelling (analoog SEG in klimaatonderzoek)",
    "ISO7730": "ISO 7730:2025 — Ergonomics of the thermal environment — Analytical determination and interpretation of thermal comfort (4th edition)",
    "ISO7243": "ISO 7243:2017 — Ergonomics of the thermal environment — Assessment of heat stress using the WBGT index (3rd edition)",
    "ISO7933": "ISO 7933:2023 — Ergonomics of the thermal environment — Analytical determination and interpretation of heat stress using calculation of the predicted heat strain (3rd edition)",
    "ISO11079": "ISO 11079:2007 — Ergonomics of the thermal environment — Determination and interpretation of cold stress using required clothing insulation (IREQ) and local cooling effects",
    "ISO7726": "ISO 7726:1998 — Ergonomics of the thermal environment — Instruments for measuring physical quantities",
})


def lookup_article(ref: str) -> LegalArticle | None:
    """Legal article for a citation id, None when unknown."""
    return LEGAL_ARTICLES.get(ref)


def lookup_abbreviation(abbreviation: str) -> str | None:
    return ABBREVIATIONS.get(abbreviation)
