# -*- encoding: utf-8 -*-
"""
Europass Named Authority Lists and EU authority tables.

Static data only. Each table is a tuple of (notation, label[, description])
rows, turned into a Vocabulary by build_named_authority_lists().

Sources:
    Europass NALs:  https://op.europa.eu/en/web/eu-vocabularies (concept scheme 25831c2)
    Currency:       http://publications.europa.eu/resource/authority/currency (ISO 4217)
    Units:          http://publications.europa.eu/resource/authority/measurement-unit
                    (UN/CEFACT Recommendation N° 20)
    Languages:      http://publications.europa.eu/resource/authority/language
                    (EU official languages as of 2013-07-01)
"""

from types import MappingProxyType

from .registry import Term, Vocabulary, VocabularyDomain


EUROPASS_NAL_VERSION = "25831c2"
SNB_BASE = "http://data.europa.eu/snb"
MDR_BASE = "http://publications.europa.eu/resource/authority"


# ---------------------------------------------------------------------------
# MDR authority tables
# ---------------------------------------------------------------------------

CURRENCIES = (
    ("ADP", "Andorran peseta"),
    ("AED", "UAE dirham"),
    ("AFA", "Afghani (1927-2003)"),
    ("AFN", "Afghani"),
    ("ALK", "Albanian lek (1946-1965)"),
    ("ALL", "Lek"),
    ("AMD", "Armenian dram"),
    ("ANG", "Netherlands Antillean guilder"),
    ("AOA", "Kwanza"),
    ("AON", "New kwanza"),
    ("AOR", "Kwanza reajustado"),
    ("ARA", "Austral"),
    ("ARM", "Peso moneda nacional"),
    ("ARP", "Peso argentino"),
    ("ARS", "Argentine peso"),
    ("ATS", "Schilling"),
    ("AUD", "Australian dollar"),
    ("AWG", "Aruban florin"),
    ("AZM", "Azerbaijani manat (1993-2005)"),
    ("AZN", "Azerbaijani manat"),
    ("BAM", "Convertible mark"),
    ("BBD", "Barbados dollar"),
    ("BDT", "Taka"),
    ("BEF", "Belgian franc"),
    ("BGJ", "Lev A/52"),
    ("BGK", "Lev A/62"),
    ("BGL", "Lev (1962-1999)"),
    ("BGN", "Bulgarian lev"),
    ("BHD", "Bahraini dinar"),
    ("BIF", "Burundi franc"),
    ("BMD", "Bermudian dollar"),
    ("BND", "Brunei dollar"),
    ("BOB", "Boliviano"),
    ("BOP", "Bolivian peso"),
    ("BOV", "Mvdol"),
    ("BRB", "Cruzeiro (1967-1986)"),
    ("BRC", "Cruzado"),
    ("BRE", "Cruzeiro (1990-1993)"),
    ("BRL", "Brazilian real"),
    ("BRN", "New cruzado"),
    ("BRR", "Cruzeiro real"),
    ("BRZ", "Cruzeiro (1942-1967)"),
    ("BSD", "Bahamian dollar"),
    ("BTN", "Ngultrum"),
    ("BWP", "Pula"),
    ("BYN", "Belarusian ruble"),
    ("BYR", "Belarusian ruble (2000-2016)"),
    ("BZD", "Belize dollar"),
    ("CAD", "Canadian dollar"),
    ("CDF", "Congolese franc"),
    ("CHE", "WIR euro"),
    ("CHF", "Swiss franc"),
    ("CHW", "WIR franc"),
    ("CLE", "Chilean escudo"),
    ("CLF", "Unidad de fomento"),
    ("CLP", "Chilean peso"),
    ("CNY", "Yuan renminbi"),
    ("COP", "Colombian peso"),
    ("COU", "Unidad de valor real"),
    ("CRC", "Costa Rican colon"),
    ("CSJ", "Krona A/53"),
    ("CSK", "Koruna"),
    ("CUC", "Peso convertible"),
    ("CUP", "Cuban peso"),
    ("CVE", "Cabo Verde escudo"),
    ("CYP", "Cyprus pound"),
    ("CZK", "Czech koruna"),
    ("DDM", "Mark der DDR"),
    ("DEM", "Deutsche Mark"),
    ("DJF", "Djibouti franc"),
    ("DKK", "Danish krone"),
    ("DOP", "Dominican peso"),
    ("DZD", "Algerian dinar"),
    ("ECS", "Sucre"),
    ("EEK", "Kroon"),
    ("EGP", "Egyptian pound"),
    ("ERN", "Nakfa"),
    ("ESP", "Spanish peseta"),
    ("ETB", "Ethiopian birr"),
    ("EUR", "Euro"),
    ("FIM", "Markka"),
    ("FJD", "Fiji dollar"),
    ("FKP", "Falkland Islands pound"),
    ("FRF", "French franc"),
    ("GBP", "Pound sterling"),
    ("GEL", "Lari"),
    ("GHC", "Cedi"),
    ("GHS", "Ghana cedi"),
    ("GIP", "Gibraltar pound"),
    ("GMD", "Dalasi"),
    ("GNE", "Syli (1971-1986)"),
    ("GNF", "Guinean franc"),
    ("GQE", "Ekwele"),
    ("GRD", "Drachma"),
    ("GTQ", "Quetzal"),
    ("GWP", "Guinea-Bissau peso"),
    ("GYD", "Guyana dollar"),
    ("HKD", "Hong Kong dollar"),
    ("HNL", "Lempira"),
    ("HRK", "Kuna"),
    ("HTG", "Gourde"),
    ("HUF", "Forint"),
    ("IDR", "Rupiah"),
    ("IEP", "Irish pound"),
    ("ILP", "Pound (Israel)"),
    ("ILR", "Old shekel"),
    ("ILS", "New Israeli sheqel"),
    ("INR", "Indian rupee"),
    ("IQD", "Iraqi dinar"),
    ("IRR", "Iranian rial"),
    ("ISJ", "Old krona (Iceland)"),
    ("ISK", "Iceland krona"),
    ("ITL", "Italian lira"),
    ("JMD", "Jamaican dollar"),
    ("JOD", "Jordanian dinar"),
    ("JPY", "Yen"),
    ("KES", "Kenyan shilling"),
    ("KGS", "Som"),
    ("KHR", "Riel"),
    ("KMF", "Comorian franc"),
    ("KPW", "North Korean won"),
    ("KRW", "Won"),
    ("KWD", "Kuwaiti dinar"),
    ("KYD", "Cayman Islands dollar"),
    ("KZT", "Tenge"),
    ("LAJ", "Pathet Lao kip"),
    ("LAK", "Lao kip"),
    ("LBP", "Lebanese pound"),
    ("LKR", "Sri Lanka rupee"),
    ("LRD", "Liberian dollar"),
    ("LSL", "Loti"),
    ("LTL", "Lithuanian litas"),
    ("LUF", "Luxembourg franc"),
    ("LVL", "Latvian lats"),
    ("LYD", "Libyan dinar"),
    ("MAD", "Moroccan dirham"),
    ("MDL", "Moldovan leu"),
    ("MGA", "Malagasy ariary"),
    ("MGF", "Malagasy franc"),
    ("MKD", "Denar"),
    ("MLF", "Mali franc"),
    ("MMK", "Kyat"),
    ("MNT", "Tugrik"),
    ("MOP", "Pataca"),
    ("MRO", "Ouguiya (1973-2017)"),
    ("MRU", "Ouguiya"),
    ("MTL", "Maltese lira"),
    ("MTP", "Maltese pound"),
    ("MUR", "Mauritius rupee"),
    ("MVQ", "Maldive rupee"),
    ("MVR", "Rufiyaa"),
    ("MWK", "Malawi kwacha"),
    ("MXN", "Mexican peso"),
    ("MXP", "Mexican peso (1861-1992)"),
    ("MXV", "Mexican unidad de inversion"),
    ("MYR", "Malaysian ringgit"),
    ("MZM", "Mozambique metical (1980-2006)"),
    ("MZN", "Mozambique metical"),
    ("NAD", "Namibia dollar"),
    ("NFD", "Newfoundland dollar"),
    ("NGN", "Naira"),
    ("NIO", "Cordoba oro"),
    ("NLG", "Netherlands guilder"),
    ("NOK", "Norwegian krone"),
    ("NPR", "Nepalese rupee"),
    ("NZD", "New Zealand dollar"),
    ("OMR", "Rial Omani"),
    ("PAB", "Balboa"),
    ("PEH", "Sol (1863-1965)"),
    ("PEI", "Inti"),
    ("PEN", "Sol"),
    ("PGK", "Kina"),
    ("PHP", "Philippine peso"),
    ("PKR", "Pakistan rupee"),
    ("PLN", "Zloty"),
    ("PLZ", "Zloty (1950-1994)"),
    ("PTE", "Portuguese escudo"),
    ("PYG", "Guarani"),
    ("QAR", "Qatari rial"),
    ("ROL", "Romanian leu (1952-2006)"),
    ("RON", "Romanian leu"),
    ("RSD", "Serbian dinar"),
    ("RUB", "Russian ruble"),
    ("RUR", "Russian ruble (1991-1998)"),
    ("RWF", "Rwanda franc"),
    ("SAR", "Saudi riyal"),
    ("SBD", "Solomon Islands dollar"),
    ("SCR", "Seychelles rupee"),
    ("SDD", "Sudanese dinar"),
    ("SDG", "Sudanese pound"),
    ("SEK", "Swedish krona"),
    ("SGD", "Singapore dollar"),
    ("SHP", "Saint Helena pound"),
    ("SIT", "Tolar"),
    ("SKK", "Slovak koruna"),
    ("SLL", "Leone"),
    ("SOS", "Somali shilling"),
    ("SRD", "Surinam dollar"),
    ("SRG", "Surinam guilder"),
    ("SSP", "South Sudanese pound"),
    ("STD", "Dobra (1977-2017)"),
    ("STN", "Dobra"),
    ("SUR", "Rouble (USSR)"),
    ("SVC", "El Salvador colon"),
    ("SYP", "Syrian pound"),
    ("SZL", "Lilangeni"),
    ("THB", "Baht"),
    ("TJR", "Tajik ruble"),
    ("TJS", "Somoni"),
    ("TMM", "Turkmenistan manat (1993-2008)"),
    ("TMT", "Turkmenistan new manat"),
    ("TND", "Tunisian dinar"),
    ("TOP", "Pa'anga"),
    ("TPE", "Timor escudo"),
    ("TRL", "Turkish lira (1922-2005)"),
    ("TRY", "Turkish lira"),
    ("TTD", "Trinidad and Tobago dollar"),
    ("TWD", "New Taiwan dollar"),
    ("TZS", "Tanzanian shilling"),
    ("UAH", "Hryvnia"),
    ("UAK", "Karbovanet"),
    ("UGS", "Uganda shilling (1966-1987)"),
    ("UGX", "Uganda shilling"),
    ("USD", "US dollar"),
    ("USN", "US dollar (next day)"),
    ("USS", "US dollar (same day)"),
    ("UYI", "Uruguay peso en unidades indexadas"),
    ("UYN", "Old Uruguay peso"),
    ("UYU", "Peso uruguayo"),
    ("UYW", "Unidad previsional"),
    ("UZS", "Uzbekistan sum"),
    ("VEB", "Bolivar (1879-2008)"),
    ("VEF", "Bolivar fuerte"),
    ("VES", "Bolivar soberano"),
    ("VNC", "Old dong"),
    ("VND", "Dong"),
    ("VUV", "Vatu"),
    ("WST", "Tala"),
    ("XAF", "CFA franc BEAC"),
    ("XAG", "Silver"),
    ("XAU", "Gold"),
    ("XBA", "European composite unit (EURCO)"),
    ("XBB", "European monetary unit (E.M.U.-6)"),
    ("XBC", "European unit of account 9 (E.U.A.-9)"),
    ("XBD", "European unit of account 17 (E.U.A.-17)"),
    ("XCD", "East Caribbean dollar"),
    ("XDR", "SDR (special drawing right)"),
    ("XEU", "European currency unit (E.C.U.)"),
    ("XOF", "CFA franc BCEAO"),
    ("XPD", "Palladium"),
    ("XPF", "CFP franc"),
    ("XPT", "Platinum"),
    ("XSU", "Sucre (SUCRE)"),
    ("XTS", "Code reserved for testing"),
    ("XUA", "ADB unit of account"),
    ("XXX", "No currency"),
    ("YDD", "Yemeni dinar"),
    ("YER", "Yemeni rial"),
    ("YUD", "New Yugoslavian dinar"),
    ("YUF", "Yugoslavian dinar (1945-1966)"),
    ("YUM", "Yugoslavian dinar (1994-2003)"),
    ("YUN", "Yugoslavian convertible dinar"),
    ("YUS", "Yugoslavian dinar (1966-1990)"),
    ("ZAR", "Rand"),
    ("ZMK", "Zambian kwacha (1968-2012)"),
    ("ZMW", "Zambian kwacha"),
    ("ZRN", "New zaire"),
    ("ZRZ", "Zaire"),
    ("ZWC", "Rhodesian dollar"),
    ("ZWD", "Zimbabwe dollar (1980-2008)"),
    ("ZWL", "Zimbabwe dollar"),
    ("ZWN", "Zimbabwe dollar (2006-2008)"),
    ("ZWR", "Zimbabwe dollar (2008-2009)"),
)

MEASUREMENT_UNITS = (
    ("2N", "decibel"),
    ("3C", "manmonth"),
    ("AD", "byte"),
    ("AMP", "ampere"),
    ("ANN", "year"),
    ("BAR", "bar"),
    ("BIT", "bit"),
    ("BQL", "becquerel"),
    ("C34", "mole"),
    ("C45", "nanometre"),
    ("CDL", "candela"),
    ("CEL", "degree Celsius"),
    ("CMK", "square centimetre"),
    ("CMQ", "cubic centimetre"),
    ("CMT", "centimetre"),
    ("D30", "terajoule"),
    ("DAY", "day"),
    ("E34", "gigabyte"),
    ("GRM", "gram"),
    ("GTE", "gross tonnage"),
    ("GWH", "gigawatt hour"),
    ("HAR", "hectare"),
    ("HLT", "hectolitre"),
    ("HTZ", "hertz"),
    ("HUR", "hour"),
    ("JOU", "joule"),
    ("KEL", "kelvin"),
    ("KGM", "kilogram"),
    ("KMH", "kilometre per hour"),
    ("KMK", "square kilometre"),
    ("KTM", "kilometre"),
    ("KWH", "kilowatt hour"),
    ("KWT", "kilowatt"),
    ("LH", "labour hour"),
    ("LTR", "litre"),
    ("MAW", "megawatt"),
    ("MGM", "milligram"),
    ("MIN", "minute"),
    ("MLT", "millilitre"),
    ("MMT", "millimetre"),
    ("MON", "month"),
    ("MTK", "square metre"),
    ("MTR", "metre"),
    ("MTS", "metre per second"),
    ("NEW", "newton"),
    ("PAL", "pascal"),
    ("SEC", "second"),
    ("TKM", "tonne kilometre"),
    ("TNE", "tonne"),
    ("TOE", "tonne of oil equivalent"),
    ("VLT", "volt"),
    ("WEE", "week"),
    ("WTT", "watt"),
)

# Units a duration (workload, volume of learning) may be expressed in
DURATION_UNITS = frozenset({"SEC", "MIN", "HUR", "DAY", "WEE", "MON", "ANN", "LH", "3C"})

# (ISO 639-1 notation, label, MDR language authority code)
EU_LANGUAGES = (
    ("bg", "Bulgarian", "BUL"),
    ("hr", "Croatian", "HRV"),
    ("cs", "Czech", "CES"),
    ("da", "Danish", "DAN"),
    ("nl", "Dutch", "NLD"),
    ("en", "English", "ENG"),
    ("et", "Estonian", "EST"),
    ("fi", "Finnish", "FIN"),
    ("fr", "French", "FRA"),
    ("de", "German", "DEU"),
    ("el", "Greek", "ELL"),
    ("hu", "Hungarian", "HUN"),
    ("ga", "Irish", "GLE"),
    ("it", "Italian", "ITA"),
    ("lv", "Latvian", "LAV"),
    ("lt", "Lithuanian", "LIT"),
    ("mt", "Maltese", "MLT"),
    ("pl", "Polish", "POL"),
    ("pt", "Portuguese", "POR"),
    ("ro", "Romanian", "RON"),
    ("sk", "Slovak", "SLK"),
    ("sl", "Slovene", "SLV"),
    ("es", "Spanish", "SPA"),
    ("sv", "Swedish", "SWE"),
)


# ---------------------------------------------------------------------------
# Europass Named Authority Lists
# ---------------------------------------------------------------------------

CREDENTIAL_TYPES = (
    ("learning-activity", "Learning activity",
     "Describes that an activity has been or is being done"),
    ("qualification-award", "Qualification award",
     "Award of a qualification by an institution listed in the Europass Accreditation Database"),
    ("diploma-supplement", "Diploma supplement",
     "Award of a higher education qualification including all diploma supplement information"),
    ("learning-entitlement", "Learning entitlement",
     "Describes that the owner has received a right"),
    ("generic", "Generic", "The default Europass credential type"),
)

VERIFICATION_TYPES = (
    ("owner", "Owner", "Is the person presenting the credential its owner"),
    ("revocation", "Revocation", "Has the credential been revoked"),
    ("format", "Format", "Was the credential issued according to its credential-type standard"),
    ("validity", "Validity", "Is the credential still valid"),
    ("custom", "Custom", "Check defined by a third-party verifier"),
    ("accreditation", "Accreditation", "Is the awarding body authorised to issue the credential"),
    ("seal", "Seal", "Has the credential been tampered with"),
)

VERIFICATION_STATUSES = (
    ("gray", "Gray", "The check could not be performed"),
    ("green", "Green", "The check passed"),
    ("red", "Red", "The check failed"),
)

ENTITLEMENT_TYPES = (
    ("occupation", "Occupation"),
    ("learning-opportunity", "Learning opportunity"),
    ("membership", "Membership"),
)

ENTITLEMENT_STATUSES = (
    ("prospective", "Prospective",
     "Right to apply for a learning opportunity, employment or membership"),
    ("actual", "Actual",
     "Right to pursue a learning opportunity, employment or membership automatically"),
)

ACCREDITATION_TYPES = (
    ("institutional-license", "Institutional licensing",
     "Licensing of an organisation, awarded by public authorities"),
    ("program-quality-assurance", "Programme quality assurance",
     "Quality assurance of one or several programmes, without legal implications"),
    ("institutional-quality-assurance", "Institutional quality assurance",
     "Quality assurance of an organisation, without legal implications"),
    ("program-license", "Programme licensing",
     "Permission for an institution to provide a specific programme"),
)

ASSESSMENT_TYPES = (
    ("peer-assessment", "Peer assessment"),
    ("marked-assignment", "Marked assignment"),
    ("continuous-evaluation", "Continuous evaluation"),
    ("portfolio", "Portfolio"),
    ("group-performance", "Group performance"),
    ("practical-assessment", "Practical assessment"),
    ("written-examination", "Written examination"),
    ("level-of-attendance", "Level of attendance"),
    ("project-work", "Project work"),
    ("peer-review", "Peer review"),
    ("quiz", "Quiz"),
    ("problem-based-learning", "Problem based learning"),
    ("oral-examination", "Oral examination"),
    ("artefact-assessment", "Artefact assessment"),
)

LEARNING_ACTIVITY_TYPES = (
    ("practical-coursework", "Lab, simulation or practice coursework"),
    ("job-experience", "Job experience"),
    ("volunteering", "Volunteering"),
    ("research", "Research"),
    ("self-motivated-study", "Self-motivated study"),
    ("e-learning-coursework", "E-learning coursework"),
    ("internship", "Internship"),
    ("apprenticeship", "Apprenticeship"),
    ("workshop", "Workshop, seminar or conference"),
    ("educational-programme", "Educational programme"),
    ("classroom-coursework", "Classroom coursework"),
)

LEARNING_OPPORTUNITY_TYPES = (
    ("course", "Course"),
    ("programme-module", "Programme module"),
    ("mentoring", "Mentoring"),
    ("mooc", "MOOC"),
    ("apprenticeship", "Apprenticeship"),
    ("study-visit", "Study visit"),
    ("short-learning-programme", "Short learning programme"),
    ("internship", "Internship"),
    ("educational-programme", "Educational programme"),
    ("class", "Class"),
    ("service-learning", "Service learning"),
    ("thesis", "Thesis"),
)

LEARNING_SCHEDULES = (
    ("part-time-light", "Part time light", "Less than 8 hours per week"),
    ("part-time-intensive", "Part time intensive", "8 to 30 hours per week"),
    ("full-time", "Full time", "More than 30 hours per week"),
)

LEARNING_SETTINGS = (
    ("formal-learning", "Formal learning"),
    ("non-formal-learning", "Non-formal learning"),
)

MODES_OF_LEARNING = (
    ("work-based", "Work-based"),
    ("project-based", "Project-based"),
    ("presential", "Presential"),
    ("online", "Online"),
    ("blended", "Blended"),
    ("research-lab-based", "Research lab-based"),
)

TARGET_GROUPS = (
    ("high-achievers", "High achievers"),
    ("non-native-speakers", "Non-native speakers"),
    ("requiring-employment-retraining", "Requiring employment retraining"),
    ("in-tertiary-education-eqf6", "In tertiary education (EQF 6)"),
    ("completed-primary-education", "Completed primary education"),
    ("in-compulsory-education", "In compulsory education"),
    ("completed-tertiary-education-eqf7", "Completed tertiary education (EQF 7)"),
    ("in-primary-education", "In primary education"),
    ("worked-less-than-3-years", "Worked less than 3 years"),
    ("completed-tertiary-education-eqf8", "Completed tertiary education (EQF 8)"),
    ("completed-compulsory-education", "Completed compulsory education"),
    ("in-tertiary-education-eqf7", "In tertiary education (EQF 7)"),
    ("in-tertiary-education-eqf8", "In tertiary education (EQF 8)"),
    ("migrants", "Migrants"),
    ("worked-3-to-10-years", "Worked 3 to 10 years"),
    ("worked-over-10-years", "Worked over 10 years"),
    ("with-learning-disability", "With learning disability"),
    ("native-speakers", "Native speakers"),
    ("completed-tertiary-education-eqf6", "Completed tertiary education (EQF 6)"),
    ("low-achievers", "Low achievers"),
)

COMMUNICATION_CHANNELS = (
    ("post", "Post"),
    ("email", "Email"),
    ("mobile-phone", "Mobile phone"),
    ("fax", "Fax"),
    ("web", "Web"),
)

COMMUNICATION_CHANNEL_USAGES = (
    ("personal", "Personal"),
    ("legal", "Legal"),
    ("business", "Business"),
    ("mobile", "Mobile"),
)

CONTENT_ENCODINGS = (
    ("base64", "Base64"),
)

EDUCATIONAL_CREDIT_SYSTEMS = (
    ("ecvet", "European credit system for vocational education and training"),
    ("ects", "European Credit Transfer System"),
)

# Attachments an issuer may add to a Europass document, keyed by media type
ATTACHMENT_TYPES = (
    ("application/pdf", "Portable Document Format"),
    ("image/png", "Portable Network Graphics"),
    ("image/jpeg", "JPEG"),
)


def _language_vocabulary() -> Vocabulary:
    """Languages carry the MDR authority code URI, not the ISO 639-1 notation."""
    terms = {
        notation: Term(
            domain=VocabularyDomain.LANGUAGE.value,
            notation=notation,
            label=label,
            description=authority_code,
            uri=f"{MDR_BASE}/language/{authority_code}",
        )
        for notation, label, authority_code in EU_LANGUAGES
    }
    return Vocabulary(
        domain=VocabularyDomain.LANGUAGE.value,
        name="Language",
        framework_uri=f"{MDR_BASE}/language",
        version="2013-07-01",
        terms=MappingProxyType(terms),
    )


def _nal(domain: VocabularyDomain, name: str, scheme: str, rows: tuple) -> Vocabulary:
    return Vocabulary.from_table(
        domain=domain,
        name=name,
        framework_uri=f"{SNB_BASE}/{scheme}/{EUROPASS_NAL_VERSION}",
        version=EUROPASS_NAL_VERSION,
        rows=rows,
    )


def build_named_authority_lists() -> list[Vocabulary]:
    """Build all Europass and MDR vocabularies."""
    return [
        Vocabulary.from_table(
            domain=VocabularyDomain.CURRENCY,
            name="Currency",
            framework_uri=f"{MDR_BASE}/currency",
            version="ISO 4217",
            rows=CURRENCIES,
            uri_base=f"{MDR_BASE}/currency/",
        ),
        Vocabulary.from_table(
            domain=VocabularyDomain.MEASUREMENT_UNIT,
            name="Measurement unit",
            framework_uri=f"{MDR_BASE}/measurement-unit",
            version="UN/CEFACT Rec. 20",
            rows=MEASUREMENT_UNITS,
            uri_base=f"{MDR_BASE}/measurement-unit/",
        ),
        _language_vocabulary(),
        _nal(VocabularyDomain.CREDENTIAL_TYPE, "Europass credential types", "credential", CREDENTIAL_TYPES),
        _nal(VocabularyDomain.VERIFICATION_TYPE, "Europass verification types", "verification", VERIFICATION_TYPES),
        _nal(VocabularyDomain.VERIFICATION_STATUS, "Europass verification statuses", "verification-status", VERIFICATION_STATUSES),
        _nal(VocabularyDomain.ENTITLEMENT_TYPE, "Europass entitlement types", "entitlement", ENTITLEMENT_TYPES),
        _nal(VocabularyDomain.ENTITLEMENT_STATUS, "Europass entitlement statuses", "entitlement-status", ENTITLEMENT_STATUSES),
        _nal(VocabularyDomain.ACCREDITATION_TYPE, "Europass accreditation types", "accreditation", ACCREDITATION_TYPES),
        _nal(VocabularyDomain.ASSESSMENT_TYPE, "Europass assessment types", "assessment", ASSESSMENT_TYPES),
        _nal(VocabularyDomain.LEARNING_ACTIVITY_TYPE, "Europass learning activity types", "learning-activity", LEARNING_ACTIVITY_TYPES),
        _nal(VocabularyDomain.LEARNING_OPPORTUNITY_TYPE, "Europass learning opportunity types", "learning-opportunity", LEARNING_OPPORTUNITY_TYPES),
        _nal(VocabularyDomain.LEARNING_SCHEDULE, "Europass learning schedule types", "learning-schedule", LEARNING_SCHEDULES),
        _nal(VocabularyDomain.LEARNING_SETTING, "Europass learning setting types", "learning-setting", LEARNING_SETTINGS),
        _nal(VocabularyDomain.MODE_OF_LEARNING, "Europass modes of learning and assessment", "learning-assessment", MODES_OF_LEARNING),
        _nal(VocabularyDomain.TARGET_GROUP, "Europass target groups", "target-group", TARGET_GROUPS),
        _nal(VocabularyDomain.COMMUNICATION_CHANNEL, "Europass communication channel types", "com-channel", COMMUNICATION_CHANNELS),
        _nal(VocabularyDomain.COMMUNICATION_CHANNEL_USAGE, "Europass communication channel usage types", "com-channel-usg", COMMUNICATION_CHANNEL_USAGES),
        _nal(VocabularyDomain.CONTENT_ENCODING, "Europass content encodings", "encoding", CONTENT_ENCODINGS),
        _nal(VocabularyDomain.EDUCATIONAL_CREDIT_SYSTEM, "Europass educational credit systems", "education-credit", EDUCATIONAL_CREDIT_SYSTEMS),
        _nal(VocabularyDomain.ATTACHMENT_TYPE, "Europass attachment types", "attachment", ATTACHMENT_TYPES),
    ]
