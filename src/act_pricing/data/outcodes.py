"""UK postcode outcode → county reference table.

Grouped by county in the same shape the booking site's postcode picker
uses.  Where a postal area straddles a boundary each outcode is filed under
the county that holds most of it; the first county listing an outcode wins.
"""

from __future__ import annotations


def _codes(area: str, first: int, last: int, *extra: str) -> tuple[str, ...]:
    """``_codes("ME", 1, 3)`` → ``("ME1", "ME2", "ME3")`` plus any extras."""
    return tuple(f"{area}{n}" for n in range(first, last + 1)) + tuple(extra)


def _suffixed(district: str, letters: str) -> tuple[str, ...]:
    """Sub-districts such as SW1A, SW1E ... for central London."""
    return tuple(f"{district}{letter}" for letter in letters)


OUTCODES_BY_COUNTY: dict[str, tuple[str, ...]] = {
    # ── London & the Home Counties ─────────────────────────────────────
    "Greater London": (
        _codes("E", 1, 18, "E1W", "E20")
        + _suffixed("EC1", "AMNPRVY") + _suffixed("EC2", "AMNPRVY")
        + _suffixed("EC3", "AMNPRV") + _suffixed("EC4", "AMNPRVY")
        + _codes("N", 1, 22, "N1C", "N1P")
        + _codes("NW", 1, 11, "NW1W")
        + _codes("SE", 1, 28, "SE1P")
        + _codes("SW", 1, 20) + _suffixed("SW1", "AEHPVWXY")
        + _codes("W", 1, 14) + _suffixed("W1", "ABCDFGHJKSTUW")
        + _suffixed("WC1", "ABEHNRVX") + _suffixed("WC2", "ABEHNR")
        + _codes("BR", 1, 8) + _codes("CR", 0, 9) + _codes("DA", 5, 8)
        + _codes("DA", 14, 18) + _codes("EN", 1, 5) + _codes("HA", 0, 9)
        + _codes("IG", 1, 11) + _codes("KT", 1, 9) + _codes("RM", 1, 14)
        + _codes("SM", 1, 7) + _codes("TW", 1, 15) + _codes("UB", 1, 10)
    ),
    "Kent": (
        _codes("ME", 1, 20) + _codes("CT", 1, 21) + _codes("TN", 1, 30)
        + _codes("DA", 1, 4) + _codes("DA", 9, 13)
    ),
    "Surrey": _codes("GU", 1, 27) + _codes("KT", 10, 24) + _codes("RH", 1, 9) + _codes("TW", 16, 20),
    "East Sussex": _codes("BN", 1, 10) + _codes("BN", 20, 27) + _codes("TN", 31, 40),
    "West Sussex": _codes("RH", 10, 20) + _codes("BN", 11, 18) + _codes("BN", 41, 45) + _codes("PO", 18, 22),
    "Hampshire": (
        _codes("SO", 14, 53) + _codes("PO", 1, 17) + _codes("GU", 30, 35)
        + ("GU46", "GU51", "GU52") + _codes("RG", 21, 29) + _codes("SP", 6, 11)
    ),
    "Isle of Wight": _codes("PO", 30, 41),
    "Berkshire": _codes("RG", 1, 8) + ("RG10", "RG12", "RG14", "RG19", "RG40", "RG41", "RG42", "RG45") + _codes("SL", 1, 6),
    "Buckinghamshire": _codes("HP", 5, 22) + _codes("MK", 1, 19) + _codes("SL", 7, 9),
    "Hertfordshire": (
        _codes("AL", 1, 10) + _codes("SG", 1, 14) + _codes("WD", 3, 7)
        + _codes("WD", 17, 25) + _codes("HP", 1, 4) + _codes("EN", 6, 11)
        + _codes("CM", 20, 23)
    ),
    "Essex": _codes("CM", 0, 19) + ("CM24",) + _codes("CO", 1, 16) + _codes("SS", 0, 17) + _codes("RM", 15, 20),
    "Oxfordshire": _codes("OX", 1, 18) + ("OX20", "OX25", "OX26", "OX27", "OX28", "OX29", "OX33", "OX39", "OX44", "OX49", "RG9"),
    "Bedfordshire": _codes("LU", 1, 7) + _codes("MK", 40, 45) + _codes("SG", 15, 19),

    # ── East of England & Midlands ─────────────────────────────────────
    "Cambridgeshire": (
        _codes("CB", 1, 11) + _codes("CB", 21, 25) + _codes("PE", 1, 8)
        + _codes("PE", 13, 16) + ("PE19",) + _codes("PE", 26, 29)
    ),
    "Norfolk": _codes("NR", 1, 35) + _codes("PE", 30, 38),
    "Suffolk": _codes("IP", 1, 33),
    "Northamptonshire": _codes("NN", 1, 18),
    "Leicestershire": _codes("LE", 1, 19) + ("LE65", "LE67"),
    "Nottinghamshire": _codes("NG", 1, 25),
    "Derbyshire": (
        _codes("DE", 1, 7) + ("DE11", "DE12") + _codes("DE", 21, 24)
        + ("DE45", "DE55", "DE56", "DE65") + _codes("DE", 72, 75)
        + _codes("S", 40, 45) + ("SK13", "SK17", "SK22", "SK23")
    ),
    "Lincolnshire": _codes("LN", 1, 13) + _codes("PE", 9, 12) + _codes("PE", 20, 25) + _codes("NG", 31, 34) + ("DN21", "DN22"),
    "Staffordshire": _codes("ST", 1, 21) + _codes("WS", 7, 15) + _codes("DE", 13, 15) + ("B77", "B78", "B79"),
    "West Midlands": (
        _codes("B", 1, 48) + _codes("B", 62, 76) + _codes("CV", 1, 7)
        + _codes("DY", 1, 9) + _codes("WS", 1, 6) + _codes("WV", 1, 14)
    ),
    "Warwickshire": _codes("CV", 8, 13) + _codes("CV", 21, 23) + _codes("CV", 31, 37) + ("B49", "B50", "B80"),
    "Worcestershire": ("B60", "B61", "B96", "B97", "B98") + _codes("WR", 1, 15) + _codes("DY", 10, 14),
    "Shropshire": _codes("SY", 1, 13) + _codes("TF", 1, 13) + ("WV15", "WV16"),
    "Herefordshire": _codes("HR", 1, 9),

    # ── South West ─────────────────────────────────────────────────────
    "Gloucestershire": _codes("GL", 1, 20) + _codes("GL", 50, 56),
    "Bristol": _codes("BS", 1, 16),
    "Somerset": _codes("BA", 1, 11) + ("BA16",) + _codes("TA", 1, 24) + _codes("BS", 20, 49),
    "Wiltshire": _codes("SN", 1, 16) + _codes("SP", 1, 5) + _codes("BA", 12, 15),
    "Dorset": _codes("DT", 1, 11) + _codes("BH", 1, 25) + ("SP7", "SP8"),
    "Devon": _codes("EX", 1, 39) + _codes("PL", 1, 9) + _codes("PL", 19, 21) + _codes("TQ", 1, 14),
    "Cornwall": _codes("TR", 1, 27) + _codes("PL", 10, 18) + _codes("PL", 22, 35),

    # ── North of England ───────────────────────────────────────────────
    "Greater Manchester": (
        _codes("M", 1, 50) + _codes("BL", 0, 9) + _codes("OL", 1, 12)
        + ("OL15", "OL16") + _codes("SK", 1, 8) + _codes("SK", 14, 16)
        + _codes("WN", 1, 8) + ("WA3", "WA13", "WA14", "WA15")
    ),
    "Merseyside": _codes("L", 1, 40) + _codes("CH", 41, 49) + _codes("CH", 60, 63) + ("WA9", "WA10", "WA11", "PR8", "PR9"),
    "Cheshire": (
        _codes("CH", 1, 4) + _codes("CH", 64, 66) + _codes("CW", 1, 12)
        + ("WA1", "WA2") + _codes("WA", 4, 8) + ("WA16",) + _codes("SK", 9, 12)
    ),
    "Lancashire": (
        _codes("PR", 0, 7) + ("PR25", "PR26") + _codes("BB", 1, 12)
        + ("BB18", "BB94") + _codes("FY", 0, 8) + _codes("LA", 1, 6)
        + ("OL13", "OL14")
    ),
    "Cumbria": _codes("CA", 1, 28) + _codes("LA", 7, 23),
    "West Yorkshire": (
        _codes("LS", 1, 29) + _codes("BD", 1, 22) + _codes("HD", 1, 9)
        + _codes("HX", 1, 7) + _codes("WF", 1, 17)
    ),
    "South Yorkshire": _codes("S", 1, 36) + _codes("DN", 1, 12),
    "North Yorkshire": (
        _codes("YO", 1, 14) + _codes("YO", 17, 19) + _codes("YO", 21, 24)
        + ("YO26", "YO30", "YO31", "YO32", "YO41", "YO51", "YO60", "YO61", "YO62")
        + _codes("HG", 1, 5) + _codes("DL", 6, 11) + ("BD23", "BD24")
    ),
    "North Humberside": _codes("HU", 1, 20) + ("YO15", "YO16", "YO25", "YO42", "YO43"),
    "South Humberside": _codes("DN", 15, 20) + _codes("DN", 31, 41),
    "Durham": _codes("DH", 1, 9) + _codes("DL", 1, 5) + _codes("DL", 12, 17),
    "Tyne and Wear": _codes("NE", 1, 40) + _codes("SR", 1, 8),
    "Northumberland": _codes("NE", 41, 71),
    "Cleveland": _codes("TS", 1, 29),

    # ── Wales ──────────────────────────────────────────────────────────
    "Cardiff": ("CF3", "CF5") + _codes("CF", 10, 24),
    "Newport": ("NP10", "NP18", "NP19", "NP20"),
    "Bridgend": _codes("CF", 31, 36),
    "Rhondda Cynon Taf": _codes("CF", 37, 45),
    "Merthyr Tydfil": ("CF47", "CF48"),
    "Caerphilly": _codes("CF", 81, 83),
    "Blaenau Gwent": ("NP13", "NP22", "NP23"),
    "Torfaen": ("NP4", "NP44"),
    "Monmouthshire": ("NP7", "NP15", "NP16", "NP25", "NP26"),
    "Neath Port Talbot": _codes("SA", 8, 13),
    "Swansea": _codes("SA", 1, 7),
    "Carmarthenshire": _codes("SA", 14, 20) + _codes("SA", 31, 33) + ("SA39", "SA44"),
    "Pembrokeshire": _codes("SA", 61, 73) + _codes("SA", 34, 37),
    "Ceredigion": _codes("SY", 23, 25) + ("SA43", "SA45", "SA46", "SA47", "SA48"),
    "Powys": _codes("LD", 1, 8) + _codes("SY", 15, 22),
    "Flintshire": _codes("CH", 5, 8),
    "Wrexham": _codes("LL", 11, 14),
    "Denbighshire": _codes("LL", 15, 21),
    "Conway": _codes("LL", 22, 34),
    "Gwynedd": _codes("LL", 35, 57),
    "Anglesey": _codes("LL", 58, 78),

    # ── Scotland ───────────────────────────────────────────────────────
    "Edinburgh": _codes("EH", 1, 17),
    "Midlothian": _codes("EH", 18, 26),
    "West Lothian": _codes("EH", 47, 55),
    "East Lothian": _codes("EH", 31, 42),
    "Glasgow": _codes("G", 1, 53),
    "East Dunbartonshire": ("G62", "G64", "G66"),
    "West Dunbartonshire": ("G60", "G81", "G82", "G83"),
    "North Lanarkshire": _codes("ML", 1, 6) + _codes("G", 67, 69),
    "South Lanarkshire": _codes("ML", 7, 12) + ("G72", "G73", "G74", "G75"),
    "East Renfrewshire": ("G76", "G77", "G78"),
    "Renfrewshire": _codes("PA", 1, 12),
    "Inverclyde": _codes("PA", 13, 19),
    "Argyll and Bute": _codes("PA", 20, 80),
    "Aberdeen City": _codes("AB", 10, 25),
    "Aberdeenshire": _codes("AB", 30, 56),
    "Dundee City": _codes("DD", 1, 5),
    "Angus": _codes("DD", 7, 11),
    "Fife": _codes("KY", 1, 16),
    "Falkirk": _codes("FK", 1, 6),
    "Clackmannanshire": ("FK10", "FK11", "FK12", "FK13", "FK14"),
    "Stirling": ("FK7", "FK8", "FK9", "FK15", "FK16", "FK17", "FK18", "FK19", "FK20", "FK21"),
    "Perth and Kinross": _codes("PH", 1, 18),
    "Highland": _codes("IV", 1, 28) + _codes("IV", 40, 63) + _codes("KW", 1, 14) + _codes("PH", 19, 44),
    "Moray": _codes("IV", 30, 36),
    "Scottish Borders": _codes("TD", 1, 15),
    "Dumfries and Galloway": _codes("DG", 1, 16),
    "East Ayrshire": _codes("KA", 1, 5) + _codes("KA", 16, 18),
    "South Ayrshire": _codes("KA", 6, 10) + ("KA19", "KA26"),
    "North Ayrshire": _codes("KA", 11, 15) + _codes("KA", 20, 25) + _codes("KA", 27, 30),
    "Orkney Islands": _codes("KW", 15, 17),
    "Shetland Islands": _codes("ZE", 1, 3),
    "Na h Eileanan Siar": _codes("HS", 1, 9),

    # ── Northern Ireland ───────────────────────────────────────────────
    "County Antrim": _codes("BT", 1, 17) + _codes("BT", 36, 44) + _codes("BT", 51, 57),
    "County Down": _codes("BT", 18, 35),
    "County Armagh": _codes("BT", 60, 67),
    "County Tyrone": _codes("BT", 68, 81),
    "County Londonderry": _codes("BT", 45, 49),
    "County Fermanagh": _codes("BT", 92, 94),
}
