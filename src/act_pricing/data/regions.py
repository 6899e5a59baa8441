"""Regions served by an act's northern team (normalized county names)."""

NORTHERN_COUNTIES: frozenset[str] = frozenset({
    # England
    "cheshire", "cleveland", "cumbria", "derbyshire", "durham",
    "greater manchester", "herefordshire", "lancashire", "leicestershire",
    "lincolnshire", "merseyside", "north humberside", "north yorkshire",
    "northumberland", "nottinghamshire", "rutland", "shropshire",
    "south humberside", "south yorkshire", "staffordshire", "tyne and wear",
    "warwickshire", "west midlands", "west yorkshire", "worcestershire",
    # Wales
    "ceredigion", "conway", "denbighshire", "flintshire", "gwynedd", "wrexham",
    "rhondda cynon taf", "torfaen", "neath port talbot", "bridgend",
    "blaenau gwent", "caerphilly", "cardiff", "merthyr tydfil", "newport",
    # Scotland
    "aberdeen city", "aberdeenshire", "angus", "argyll and bute",
    "clackmannanshire", "dumfries and galloway", "dundee city", "east ayrshire",
    "east dunbartonshire", "east lothian", "east renfrewshire", "edinburgh",
    "falkirk", "fife", "glasgow", "highland", "inverclyde", "midlothian", "moray",
    "na h eileanan siar", "north ayrshire", "north lanarkshire", "orkney islands",
    "perth and kinross", "renfrewshire", "scottish borders", "shetland islands",
    "south ayrshire", "south lanarkshire", "stirling", "west dunbartonshire",
    "west lothian",
})
