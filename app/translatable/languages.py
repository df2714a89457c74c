"""ISO 639-1 language registry and validation.

The registry is a static, process-wide table of the 183 ISO 639-1 codes and
their English names, declared in registry order. Validation accepts a code
or an English name in any case; failures carry the closest registry entries
ranked by edit distance.

Usage:
    from translatable.languages import Language, validate_language

    validate_language("ES")        # Language.ES
    validate_language("Spanish")   # Language.ES
    validate_language("xx")        # raises InvalidLanguage with suggestions
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from translatable.errors import InvalidLanguage

# Suggestions are capped so error messages stay short.
MAX_SUGGESTIONS = 5


class Language(str, Enum):
    """ISO 639-1 language codes, in registry order."""

    AB = "ab"
    AA = "aa"
    AF = "af"
    AK = "ak"
    SQ = "sq"
    AM = "am"
    AR = "ar"
    AN = "an"
    HY = "hy"
    AS = "as"
    AV = "av"
    AE = "ae"
    AY = "ay"
    AZ = "az"
    BM = "bm"
    BA = "ba"
    EU = "eu"
    BE = "be"
    BN = "bn"
    BI = "bi"
    BS = "bs"
    BR = "br"
    BG = "bg"
    MY = "my"
    CA = "ca"
    CH = "ch"
    CE = "ce"
    NY = "ny"
    ZH = "zh"
    CU = "cu"
    CV = "cv"
    KW = "kw"
    CO = "co"
    CR = "cr"
    HR = "hr"
    CS = "cs"
    DA = "da"
    DV = "dv"
    NL = "nl"
    DZ = "dz"
    EN = "en"
    EO = "eo"
    ET = "et"
    EE = "ee"
    FO = "fo"
    FJ = "fj"
    FI = "fi"
    FR = "fr"
    FY = "fy"
    FF = "ff"
    GD = "gd"
    GL = "gl"
    LG = "lg"
    KA = "ka"
    DE = "de"
    EL = "el"
    KL = "kl"
    GN = "gn"
    GU = "gu"
    HT = "ht"
    HA = "ha"
    HE = "he"
    HZ = "hz"
    HI = "hi"
    HO = "ho"
    HU = "hu"
    IS = "is"
    IO = "io"
    IG = "ig"
    ID = "id"
    IA = "ia"
    IE = "ie"
    IU = "iu"
    IK = "ik"
    GA = "ga"
    IT = "it"
    JA = "ja"
    JV = "jv"
    KN = "kn"
    KR = "kr"
    KS = "ks"
    KK = "kk"
    KM = "km"
    KI = "ki"
    RW = "rw"
    KY = "ky"
    KV = "kv"
    KG = "kg"
    KO = "ko"
    KJ = "kj"
    KU = "ku"
    LO = "lo"
    LA = "la"
    LV = "lv"
    LI = "li"
    LN = "ln"
    LT = "lt"
    LU = "lu"
    LB = "lb"
    MK = "mk"
    MG = "mg"
    MS = "ms"
    ML = "ml"
    MT = "mt"
    GV = "gv"
    MI = "mi"
    MR = "mr"
    MH = "mh"
    MN = "mn"
    NA = "na"
    NV = "nv"
    ND = "nd"
    NR = "nr"
    NG = "ng"
    NE = "ne"
    NO = "no"
    NB = "nb"
    NN = "nn"
    OC = "oc"
    OJ = "oj"
    OR = "or"
    OM = "om"
    OS = "os"
    PI = "pi"
    PS = "ps"
    FA = "fa"
    PL = "pl"
    PT = "pt"
    PA = "pa"
    QU = "qu"
    RO = "ro"
    RM = "rm"
    RN = "rn"
    RU = "ru"
    SE = "se"
    SM = "sm"
    SG = "sg"
    SA = "sa"
    SC = "sc"
    SR = "sr"
    SN = "sn"
    SD = "sd"
    SI = "si"
    SK = "sk"
    SL = "sl"
    SO = "so"
    ST = "st"
    ES = "es"
    SU = "su"
    SW = "sw"
    SS = "ss"
    SV = "sv"
    TL = "tl"
    TY = "ty"
    TG = "tg"
    TA = "ta"
    TT = "tt"
    TE = "te"
    TH = "th"
    BO = "bo"
    TI = "ti"
    TO = "to"
    TS = "ts"
    TN = "tn"
    TR = "tr"
    TK = "tk"
    TW = "tw"
    UG = "ug"
    UK = "uk"
    UR = "ur"
    UZ = "uz"
    VE = "ve"
    VI = "vi"
    VO = "vo"
    WA = "wa"
    CY = "cy"
    WO = "wo"
    XH = "xh"
    II = "ii"
    YI = "yi"
    YO = "yo"
    ZA = "za"
    ZU = "zu"

    @property
    def code(self) -> str:
        """Two-letter ISO 639-1 code (e.g., "es")."""
        return self.value

    @property
    def display_name(self) -> str:
        """English name of the language (e.g., "Spanish")."""
        return _DISPLAY_NAMES[self.value]


_DISPLAY_NAMES: dict[str, str] = {
    "ab": "Abkhazian",
    "aa": "Afar",
    "af": "Afrikaans",
    "ak": "Akan",
    "sq": "Albanian",
    "am": "Amharic",
    "ar": "Arabic",
    "an": "Aragonese",
    "hy": "Armenian",
    "as": "Assamese",
    "av": "Avaric",
    "ae": "Avestan",
    "ay": "Aymara",
    "az": "Azerbaijani",
    "bm": "Bambara",
    "ba": "Bashkir",
    "eu": "Basque",
    "be": "Belarusian",
    "bn": "Bengali",
    "bi": "Bislama",
    "bs": "Bosnian",
    "br": "Breton",
    "bg": "Bulgarian",
    "my": "Burmese",
    "ca": "Catalan",
    "ch": "Chamorro",
    "ce": "Chechen",
    "ny": "Chichewa",
    "zh": "Chinese",
    "cu": "Church Slavonic",
    "cv": "Chuvash",
    "kw": "Cornish",
    "co": "Corsican",
    "cr": "Cree",
    "hr": "Croatian",
    "cs": "Czech",
    "da": "Danish",
    "dv": "Divehi",
    "nl": "Dutch",
    "dz": "Dzongkha",
    "en": "English",
    "eo": "Esperanto",
    "et": "Estonian",
    "ee": "Ewe",
    "fo": "Faroese",
    "fj": "Fijian",
    "fi": "Finnish",
    "fr": "French",
    "fy": "Western Frisian",
    "ff": "Fulah",
    "gd": "Gaelic",
    "gl": "Galician",
    "lg": "Ganda",
    "ka": "Georgian",
    "de": "German",
    "el": "Greek",
    "kl": "Kalaallisut",
    "gn": "Guarani",
    "gu": "Gujarati",
    "ht": "Haitian",
    "ha": "Hausa",
    "he": "Hebrew",
    "hz": "Herero",
    "hi": "Hindi",
    "ho": "Hiri Motu",
    "hu": "Hungarian",
    "is": "Icelandic",
    "io": "Ido",
    "ig": "Igbo",
    "id": "Indonesian",
    "ia": "Interlingua",
    "ie": "Interlingue",
    "iu": "Inuktitut",
    "ik": "Inupiaq",
    "ga": "Irish",
    "it": "Italian",
    "ja": "Japanese",
    "jv": "Javanese",
    "kn": "Kannada",
    "kr": "Kanuri",
    "ks": "Kashmiri",
    "kk": "Kazakh",
    "km": "Central Khmer",
    "ki": "Kikuyu",
    "rw": "Kinyarwanda",
    "ky": "Kyrgyz",
    "kv": "Komi",
    "kg": "Kongo",
    "ko": "Korean",
    "kj": "Kuanyama",
    "ku": "Kurdish",
    "lo": "Lao",
    "la": "Latin",
    "lv": "Latvian",
    "li": "Limburgan",
    "ln": "Lingala",
    "lt": "Lithuanian",
    "lu": "Luba-Katanga",
    "lb": "Luxembourgish",
    "mk": "Macedonian",
    "mg": "Malagasy",
    "ms": "Malay",
    "ml": "Malayalam",
    "mt": "Maltese",
    "gv": "Manx",
    "mi": "Maori",
    "mr": "Marathi",
    "mh": "Marshallese",
    "mn": "Mongolian",
    "na": "Nauru",
    "nv": "Navajo",
    "nd": "North Ndebele",
    "nr": "South Ndebele",
    "ng": "Ndonga",
    "ne": "Nepali",
    "no": "Norwegian",
    "nb": "Norwegian Bokmål",
    "nn": "Norwegian Nynorsk",
    "oc": "Occitan",
    "oj": "Ojibwa",
    "or": "Oriya",
    "om": "Oromo",
    "os": "Ossetian",
    "pi": "Pali",
    "ps": "Pashto",
    "fa": "Persian",
    "pl": "Polish",
    "pt": "Portuguese",
    "pa": "Punjabi",
    "qu": "Quechua",
    "ro": "Romanian",
    "rm": "Romansh",
    "rn": "Rundi",
    "ru": "Russian",
    "se": "North Sami",
    "sm": "Samoan",
    "sg": "Sango",
    "sa": "Sanskrit",
    "sc": "Sardinian",
    "sr": "Serbian",
    "sn": "Shona",
    "sd": "Sindhi",
    "si": "Sinhala",
    "sk": "Slovak",
    "sl": "Slovenian",
    "so": "Somali",
    "st": "Southern Sotho",
    "es": "Spanish",
    "su": "Sundanese",
    "sw": "Swahili",
    "ss": "Swati",
    "sv": "Swedish",
    "tl": "Tagalog",
    "ty": "Tahitian",
    "tg": "Tajik",
    "ta": "Tamil",
    "tt": "Tatar",
    "te": "Telugu",
    "th": "Thai",
    "bo": "Tibetan",
    "ti": "Tigrinya",
    "to": "Tonga",
    "ts": "Tsonga",
    "tn": "Tswana",
    "tr": "Turkish",
    "tk": "Turkmen",
    "tw": "Twi",
    "ug": "Uighur",
    "uk": "Ukrainian",
    "ur": "Urdu",
    "uz": "Uzbek",
    "ve": "Venda",
    "vi": "Vietnamese",
    "vo": "Volapük",
    "wa": "Walloon",
    "cy": "Welsh",
    "wo": "Wolof",
    "xh": "Xhosa",
    "ii": "Sichuan Yi",
    "yi": "Yiddish",
    "yo": "Yoruba",
    "za": "Zhuang",
    "zu": "Zulu",
}

# Lowercase code or English name -> Language.
_IDENTIFIERS: dict[str, Language] = {}
for _language in Language:
    _IDENTIFIERS[_language.value] = _language
    _IDENTIFIERS[_language.display_name.lower()] = _language
del _language


@dataclass(frozen=True)
class LanguageSuggestion:
    """A registry entry proposed for a rejected language input.

    Attributes:
        language: Suggested Language.
        distance: Edit distance between the input and the entry.
    """

    language: Language
    distance: int

    @property
    def code(self) -> str:
        return self.language.value

    @property
    def display_name(self) -> str:
        return self.language.display_name


def _edit_distance(a: str, b: str) -> int:
    """Levenshtein distance between two strings."""
    dp = list(range(len(b) + 1))
    for i, ca in enumerate(a, 1):
        prev = dp[0]
        dp[0] = i
        for j, cb in enumerate(b, 1):
            ins = dp[j] + 1
            dele = dp[j - 1] + 1
            sub = prev + (0 if ca == cb else 1)
            prev, dp[j] = dp[j], min(ins, dele, sub)
    return dp[-1]


def suggest_languages(
    attempt: str, limit: int = MAX_SUGGESTIONS
) -> list[LanguageSuggestion]:
    """Rank registry entries by similarity to an input.

    Each entry is scored by the smaller of the distances to its code and to
    its lowercase English name. Ties keep registry order.

    Args:
        attempt: The rejected input.
        limit: Maximum number of suggestions returned.

    Returns:
        Suggestions, most similar first.
    """
    key = attempt.strip().lower()
    scored = [
        LanguageSuggestion(
            language=language,
            distance=min(
                _edit_distance(key, language.value),
                _edit_distance(key, language.display_name.lower()),
            ),
        )
        for language in Language
    ]
    scored.sort(key=lambda suggestion: suggestion.distance)
    return scored[:limit]


def validate_language(code: Union[str, Language]) -> Language:
    """Validate a language input against the registry.

    Args:
        code: ISO 639-1 code or English name, in any case, or a Language.

    Returns:
        The matching Language.

    Raises:
        InvalidLanguage: If the input matches no registry entry.
    """
    if isinstance(code, Language):
        return code
    if not isinstance(code, str):
        raise InvalidLanguage(repr(code), suggest_languages(str(code)))

    language = _IDENTIFIERS.get(code.strip().lower())
    if language is None:
        raise InvalidLanguage(code, suggest_languages(code))
    return language


def is_valid_language(code: Union[str, Language]) -> bool:
    """Check whether an input names a registry language."""
    try:
        validate_language(code)
    except InvalidLanguage:
        return False
    return True
