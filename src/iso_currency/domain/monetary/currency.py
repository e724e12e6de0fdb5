from __future__ import annotations

import logging
from collections.abc import Sequence
from enum import Enum, unique
from types import MappingProxyType
from typing import TypeAlias

from iso_currency.domain.monetary.currency_category import CurrencyCategory, category_for_alpha_code

logger = logging.getLogger(__name__)

# Length of the ASCII alpha code, not of any internal representation
ALPHA_CODE_LENGTH = 3

# Alpha code bytes followed by a single null terminator
FIXED_BYTES_LENGTH = ALPHA_CODE_LENGTH + 1

# Use where raw ASCII bytes are expected; signed (-128..127) and unsigned (0..255) items are both accepted
ByteSequenceLike: TypeAlias = bytes | bytearray | memoryview | Sequence[int]


@unique
class Currency(Enum):
    """ISO 4217 currency code.

    Closed set of entries. The value of each member is its ISO numeric code, the member name is its
    alpha code. `XXX` ("No country code") is the default and the fallback for any input that cannot be
    parsed; parsing through `from_alpha` / `from_bytes` never raises for well-typed input.

    Examples:
        >>> Currency.from_alpha("eur")
        <Currency.EUR: 978>
        >>> Currency.EUR.to_numeric()
        978
        >>> str(Currency.USD)
        '"USD"'
    """

    AED = (784, "United Arab Emirates dirham United Arab Emirates")
    AFN = (971, "Afghan afghani Afghanistan")
    ALL = (8, "Albanian lek Albania")
    AMD = (51, "Armenian dram Armenia")
    ANG = (532, "Netherlands Antillean guilder Curaçao")
    AOA = (973, "Angolan kwanza Angola")
    ARS = (32, "Argentine peso Argentina")
    AUD = (36, "Australian dollar Australia")
    AWG = (533, "Aruban florin Aruba")
    AZN = (944, "Azerbaijani manat Azerbaijan")
    BAM = (977, "Bosnia and Herzegovina convertible mark Bosnia and Herzegovina")
    BBD = (52, "Barbados dollar Barbados")
    BDT = (50, "Bangladeshi taka Bangladesh")
    BGN = (975, "Bulgarian lev Bulgaria")
    BHD = (48, "Bahraini dinar Bahrain")
    BIF = (108, "Burundian franc Burundi")
    BMD = (60, "Bermudian dollar Bermuda")
    BND = (96, "Brunei dollar Brunei")
    BOB = (68, "Boliviano Bolivia")
    BOV = (984, "Bolivian Mvdol (funds code)")
    BRL = (986, "Brazilian real Brazil")
    BSD = (44, "Bahamian dollar Bahamas")
    BTN = (64, "Bhutanese ngultrum Bhutan")
    BWP = (72, "Botswana pula Botswana")
    BYN = (933, "Belarusian ruble Belarus")
    BZD = (84, "Belize dollar Belize")
    CAD = (124, "Canadian dollar Canada")
    CDF = (976, "Congolese franc Democratic Republic of the Congo")
    CHE = (947, "WIR euro (complementary currency)")
    CHF = (756, "Swiss franc Switzerland")
    CHW = (948, "WIR franc (complementary currency)")
    CLF = (990, "Unidad de Fomento (funds code)")
    CLP = (152, "Chilean peso Chile")
    CNY = (156, "Renminbi")
    COP = (170, "Colombian peso Colombia")
    COU = (970, "Unidad de Valor Real (UVR) (funds code)")
    CRC = (188, "Costa Rican colon Costa Rica")
    CUC = (931, "Cuban convertible peso Cuba")
    CUP = (192, "Cuban peso Cuba")
    CVE = (132, "Cape Verdean escudo Cabo Verde")
    CZK = (203, "Czech koruna Czechia")
    DJF = (262, "Djiboutian franc Djibouti")
    DKK = (208, "Danish krone Denmark")
    DOP = (214, "Dominican peso Dominican Republic")
    DZD = (12, "Algerian dinar Algeria")
    EGP = (818, "Egyptian pound Egypt")
    ERN = (232, "Eritrean nakfa Eritrea")
    ETB = (230, "Ethiopian birr Ethiopia")
    EUR = (978, "Euro")
    FJD = (242, "Fiji dollar Fiji")
    FKP = (238, "Falkland Islands pound Falkland Islands (pegged to GBP)")
    GBP = (826, "Pound sterling United Kingdom")
    GEL = (981, "Georgian lari Georgia")
    GHS = (936, "Ghanaian cedi Ghana")
    GIP = (292, "Gibraltar pound Gibraltar (pegged to GBP)")
    GMD = (270, "Gambian dalasi Gambia")
    GNF = (324, "Guinean franc Guinea")
    GTQ = (320, "Guatemalan quetzal Guatemala")
    GYD = (328, "Guyanese dollar Guyana")
    HKD = (344, "Hong Kong dollar Hong Kong")
    HNL = (340, "Honduran lempira Honduras")
    HTG = (332, "Haitian gourde Haiti")
    HUF = (348, "Hungarian forint Hungary")
    IDR = (360, "Indonesian rupiah Indonesia")
    ILS = (376, "Israeli new shekel Israel")
    INR = (356, "Indian rupee India")
    IQD = (368, "Iraqi dinar Iraq")
    IRR = (364, "Iranian rial Iran")
    ISK = (352, "Icelandic króna Iceland")
    JMD = (388, "Jamaican dollar Jamaica")
    JOD = (400, "Jordanian dinar Jordan")
    JPY = (392, "Japanese yen Japan")
    KES = (404, "Kenyan shilling Kenya")
    KGS = (417, "Kyrgyzstani som Kyrgyzstan")
    KHR = (116, "Cambodian riel Cambodia")
    KMF = (174, "Comoro franc Comoros")
    KPW = (408, "North Korean won North Korea")
    KRW = (410, "South Korean won")
    KWD = (414, "Kuwaiti dinar Kuwait")
    KYD = (136, "Cayman Islands dollar Cayman Islands")
    KZT = (398, "Kazakhstani tenge Kazakhstan")
    LAK = (418, "Lao kip Laos")
    LBP = (422, "Lebanese pound Lebanon")
    LKR = (144, "Sri Lankan rupee Sri Lanka")
    LRD = (430, "Liberian dollar Liberia")
    LSL = (426, "Lesotho loti Lesotho")
    LYD = (434, "Libyan dinar Libya")
    MAD = (504, "Moroccan dirham Morocco")
    MDL = (498, "Moldovan leu Moldova")
    MGA = (969, "Malagasy ariary")
    MKD = (807, "Macedonian denar North Macedonia")
    MMK = (104, "Myanmar kyat Myanmar")
    MNT = (496, "Mongolian tögrög")
    MOP = (446, "Macanese pataca Macau")
    MRU = (929, "Mauritanian ouguiya")
    MUR = (480, "Mauritian rupee Mauritius")
    MVR = (462, "Maldivian rufiyaa Maldives")
    MWK = (454, "Malawian kwacha Malawi")
    MXN = (484, "Mexican peso Mexico")
    MXV = (979, "Mexican Unidad de Inversion (UDI) (funds code)")
    MYR = (458, "Malaysian ringgit Malaysia")
    MZN = (943, "Mozambican metical Mozambique")
    NAD = (516, "Namibian dollar Namibia (pegged to ZAR)")
    NGN = (566, "Nigerian naira Nigeria")
    NIO = (558, "Nicaraguan córdoba Nicaragua")
    NOK = (578, "Norwegian krone Norway")
    NPR = (524, "Nepalese rupee Nepal")
    NZD = (554, "New Zealand dollar New Zealand")
    OMR = (512, "Omani rial Oman")
    PAB = (590, "Panamanian balboa Panama")
    PEN = (604, "Peruvian sol Peru")
    PGK = (598, "Papua New Guinean kina Papua New Guinea")
    PHP = (608, "Philippine peso")
    PKR = (586, "Pakistani rupee Pakistan")
    PLN = (985, "Polish złoty Poland")
    PYG = (600, "Paraguayan guaraní Paraguay")
    QAR = (634, "Qatari riyal Qatar")
    RON = (946, "Romanian leu Romania")
    RSD = (941, "Serbian dinar Serbia")
    RUB = (643, "Russian ruble Russia")
    RWF = (646, "Rwandan franc Rwanda")
    SAR = (682, "Saudi riyal Saudi Arabia")
    SBD = (90, "Solomon Islands dollar Solomon Islands")
    SCR = (690, "Seychelles rupee Seychelles")
    SDG = (938, "Sudanese pound Sudan")
    SEK = (752, "Swedish krona Sweden")
    SGD = (702, "Singapore dollar Singapore")
    SHP = (654, "Saint Helena pound Saint Helena")
    SLE = (925, "Sierra Leonean leone (new leone)")
    SLL = (694, "Sierra Leonean leone (old leone)")
    SOS = (706, "Somali shilling Somalia")
    SRD = (968, "Surinamese dollar Suriname")
    SSP = (728, "South Sudanese pound South Sudan")
    STN = (930, "São Tomé and Príncipe dobra")
    SVC = (222, "Salvadoran colón El Salvador")
    SYP = (760, "Syrian pound Syria")
    SZL = (748, "Swazi lilangeni Eswatini")
    THB = (764, "Thai baht Thailand")
    TJS = (972, "Tajikistani somoni Tajikistan")
    TMT = (934, "Turkmenistan manat Turkmenistan")
    TND = (788, "Tunisian dinar Tunisia")
    TOP = (776, "Tongan paʻanga Tonga")
    TRY = (949, "Turkish lira Turkey")
    TTD = (780, "Trinidad and Tobago dollar Trinidad and Tobago")
    TWD = (901, "New Taiwan dollar Taiwan")
    TZS = (834, "Tanzanian shilling Tanzania")
    UAH = (980, "Ukrainian hryvnia Ukraine")
    UGX = (800, "Ugandan shilling Uganda")
    USD = (840, "United States dollar United States")
    USN = (997, "United States dollar (next day) (funds code)")
    UYI = (940, "Uruguay Peso en Unidades Indexadas (URUIURUI) (funds code)")
    UYU = (858, "Uruguayan peso Uruguay")
    UYW = (927, "Unidad previsional")
    UZS = (860, "Uzbekistan sum Uzbekistan")
    VED = (926, "Venezuelan digital bolívar Venezuela")
    VES = (928, "Venezuelan sovereign bolívar Venezuela")
    VND = (704, "Vietnamese đồng Vietnam")
    VUV = (548, "Vanuatu vatu Vanuatu")
    WST = (882, "Samoan tala Samoa")
    XAF = (950, "CFA franc BEAC Cameroon (CM)")
    XAG = (961, "Silver (one troy ounce)")
    XAU = (959, "Gold (one troy ounce)")
    XBA = (955, "European Composite Unit (bond market unit)")
    XBB = (956, "European Monetary Unit (bond market unit)")
    XBC = (957, "European Unit of Account 9 (bond market unit)")
    XBD = (958, "European unit of account 17 (bond market unit)")
    XCD = (951, "East Caribbean dollar Anguilla (AI)")
    XDR = (960, "Special drawing rights")
    XOF = (952, "CFA franc BCEAO Benin (BJ)")
    XPD = (964, "Palladium (one troy ounce)")
    XPF = (953, "CFP franc (franc Pacifique)")
    XPT = (962, "Platinum (one troy ounce)")
    XSU = (994, "SUCRE")
    XTS = (963, "Code reserved for testing")
    XUA = (965, "ADB Unit of Account")
    XXX = (999, "No country code")
    YER = (886, "Yemeni rial Yemen")
    ZAR = (710, "South African rand Eswatini")
    ZMW = (967, "Zambian kwacha Zambia")
    ZWL = (932, "Zimbabwean dollar (fifth)")

    def __new__(cls, numeric_code: int, display_name: str) -> Currency:
        member = object.__new__(cls)
        member._value_ = numeric_code
        member._display_name = display_name
        return member

    # region Construction

    @classmethod
    def default(cls) -> Currency:
        """Return the "no currency" sentinel `XXX`."""
        return cls.XXX

    @classmethod
    def from_alpha(cls, value: str) -> Currency:
        """Parse a currency from its alpha code, falling back to `XXX`.

        Input shorter than 3 characters returns `XXX`. Otherwise $value is upper-cased and only its
        first 3 characters are looked up, so trailing characters are ignored ("USDX" -> USD).
        Unknown codes return `XXX` as well.

        Args:
            value (str): Text starting with an alpha code, in any letter case.

        Returns:
            Currency: The matching member, or `XXX` when $value cannot be parsed.

        Raises:
            TypeError: If $value is not a str.
        """
        # Raise: $value must be a string
        if not isinstance(value, str):
            raise TypeError(f"$value must be a str, but provided value is: {value!r}")

        if len(value) < ALPHA_CODE_LENGTH:
            logger.debug(f"$value {value!r} is shorter than {ALPHA_CODE_LENGTH} characters; falling back to XXX")
            return cls.XXX

        return cls._lookup_folded(value)

    @classmethod
    def from_bytes(cls, value: ByteSequenceLike) -> Currency:
        """Parse a currency from UTF-8 bytes, falling back to `XXX`.

        Accepts `bytes`, `bytearray`, `memoryview` or any sequence of signed (-128..127) or unsigned
        (0..255) 8-bit integers. Only the first 3 items are examined, so the null terminator written by
        `to_fixed_bytes` and any other trailing bytes are ignored. Input shorter than 3 items, items
        outside the 8-bit range and a prefix that is not valid UTF-8 all return `XXX`.

        The 3 bytes are decoded and then folded exactly like `from_alpha`, but the length check counts
        bytes, so a 2-byte character may decode into fewer than 3 characters and still be looked up
        (b"\\xc3\\x9fP", i.e. "ßP", folds to "SSP").

        Args:
            value (ByteSequenceLike): Byte sequence starting with an encoded alpha code.

        Returns:
            Currency: The matching member, or `XXX` when $value cannot be parsed.

        Raises:
            TypeError: If $value is a str or not a sequence.
        """
        # Raise: $value must be a byte-like sequence (str is a sequence too, but of characters)
        if isinstance(value, str) or not isinstance(value, Sequence):
            raise TypeError(f"$value must be a sequence of 8-bit integers, but provided value is: {value!r}")

        if len(value) < ALPHA_CODE_LENGTH:
            logger.debug(f"$value {value!r} has fewer than {ALPHA_CODE_LENGTH} bytes; falling back to XXX")
            return cls.XXX

        head = list(value[:ALPHA_CODE_LENGTH])
        if not all(isinstance(item, int) and -128 <= item <= 255 for item in head):
            logger.debug(f"$value {value!r} does not start with 8-bit integers; falling back to XXX")
            return cls.XXX

        try:
            # Signed bytes map onto their unsigned counterpart (-1 -> 0xFF)
            text = bytes(item & 0xFF for item in head).decode("utf-8")
        except UnicodeDecodeError:
            logger.debug(f"$value {value!r} does not start with valid UTF-8; falling back to XXX")
            return cls.XXX

        return cls._lookup_folded(text)

    @classmethod
    def _lookup_folded(cls, text: str) -> Currency:
        # Upper-casing can change length ("ß" -> "SS"), so slice the folded text
        alpha_code = text.upper()[:ALPHA_CODE_LENGTH]
        currency = CURRENCIES_BY_ALPHA_CODE.get(alpha_code)
        if currency is None:
            logger.debug(f"Unknown alpha code '{alpha_code}' in {text!r}; falling back to XXX")
            return cls.XXX

        return currency

    @classmethod
    def from_numeric(cls, value: int) -> Currency:
        """Look up a currency by its ISO numeric code, falling back to `XXX`.

        Unlike `Currency(value)`, which raises `ValueError` for unknown numbers, this never fails for
        an integer input.

        Raises:
            TypeError: If $value is not an int.
        """
        # Raise: $value must be an integer (bool is excluded on purpose)
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"$value must be an int, but provided value is: {value!r}")

        currency = CURRENCIES_BY_NUMERIC_CODE.get(value)
        if currency is None:
            logger.debug(f"Unknown numeric code {value}; falling back to XXX")
            return cls.XXX

        return currency

    @classmethod
    def try_from_alpha(cls, value: str) -> Currency | None:
        """Strictly parse an alpha code.

        Returns None unless $value is exactly 3 characters naming a known code (letter case is
        ignored). Use it where an explicit `XXX` must be told apart from unparsable input.

        Raises:
            TypeError: If $value is not a str.
        """
        # Raise: $value must be a string
        if not isinstance(value, str):
            raise TypeError(f"$value must be a str, but provided value is: {value!r}")

        if len(value) != ALPHA_CODE_LENGTH:
            return None

        return CURRENCIES_BY_ALPHA_CODE.get(value.upper())

    # endregion

    # region Attributes

    @property
    def alpha_code(self) -> str:
        """Get the 3-letter uppercase alpha code."""
        return self.name

    @property
    def numeric_code(self) -> int:
        """Get the ISO numeric code."""
        return self.value

    @property
    def display_name(self) -> str:
        """Get the English display name."""
        return self._display_name

    @property
    def category(self) -> CurrencyCategory:
        """Get the kind of unit this entry represents."""
        return category_for_alpha_code(self.name)

    # endregion

    # region Conversion

    def to_alpha(self) -> str:
        """Return the 3-letter uppercase alpha code (e.g. "USD")."""
        return self.name

    def to_numeric(self) -> int:
        """Return the ISO numeric code (e.g. 840 for USD)."""
        return self.value

    def to_fixed_bytes(self) -> bytes:
        """Return the 4-byte null-terminated encoding (e.g. b"USD\\x00").

        The first 3 bytes are the ASCII alpha code and the 4th is always the null byte, which suits
        fixed-width records and C `char[4]` fields.
        """
        return self.name.encode("ascii") + b"\0"

    def display(self) -> str:
        """Return the alpha code wrapped in double quotes (e.g. '"USD"')."""
        return f'"{self.name}"'

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return self.display()

    def __format__(self, format_spec: str) -> str:
        return format(self.display(), format_spec)

    # endregion


# Reverse lookups, built once at import and read-only
CURRENCIES_BY_ALPHA_CODE = MappingProxyType({currency.name: currency for currency in Currency})
CURRENCIES_BY_NUMERIC_CODE = MappingProxyType({currency.value: currency for currency in Currency})
