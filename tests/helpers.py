"""Canned BGG payloads and fakes for the catalog and index tests."""

from __future__ import annotations

from typing import Any, Callable


SEARCH_XML = """<?xml version="1.0" encoding="utf-8"?>
<items total="5" termsofuse="https://boardgamegeek.com/xmlapi/termsofuse">
    <item type="boardgame" id="266192">
        <name type="primary" value="Wingspan"/>
        <yearpublished value="2019"/>
    </item>
    <item type="boardgameexpansion" id="290837">
        <name type="primary" value="Wingspan: European Expansion"/>
        <yearpublished value="2019"/>
    </item>
    <item type="boardgame" id="266192">
        <name type="alternate" value="Flügelschlag"/>
        <yearpublished value="2019"/>
    </item>
    <item type="boardgame" id="366161">
        <name type="primary" value="Wingspan Asia"/>
        <yearpublished value="unknown"/>
    </item>
    <item type="boardgame">
        <name type="primary" value="No id at all"/>
    </item>
</items>
"""

EMPTY_ITEMS_XML = """<?xml version="1.0" encoding="utf-8"?>
<items total="0" termsofuse="https://boardgamegeek.com/xmlapi/termsofuse"/>
"""

THING_XML = """<?xml version="1.0" encoding="utf-8"?>
<items termsofuse="https://boardgamegeek.com/xmlapi/termsofuse">
    <item type="boardgame" id="266192">
        <thumbnail>https://cf.geekdo-images.com/wingspan_thumb.jpg</thumbnail>
        <image>https://cf.geekdo-images.com/wingspan.jpg</image>
        <name type="primary" sortindex="1" value="Wingspan"/>
        <name type="alternate" sortindex="1" value="Flügelschlag"/>
        <description>Attract a beautiful and diverse collection of birds to your wildlife preserve.</description>
        <yearpublished value="2019"/>
        <minplayers value="1"/>
        <maxplayers value="5"/>
        <playingtime value="70"/>
        <minplaytime value="40"/>
        <maxplaytime value="70"/>
        <minage value="10"/>
        <link type="boardgamecategory" id="1089" value="Animals"/>
        <link type="boardgamemechanic" id="2041" value="Open Drafting"/>
        <link type="boardgameexpansion" id="290837" value="Wingspan: European Expansion"/>
        <link type="boardgameexpansion" id="300905" value="Wingspan: Oceania Expansion"/>
        <link type="boardgamedesigner" id="105188" value="Elizabeth Hargrave"/>
        <link type="boardgamepublisher" id="23202" value="Stonemaier Games"/>
        <link type="boardgamepublisher" id="99999" value=""/>
        <link type="boardgamefamily" id="59218" value="Theme: Birds"/>
        <statistics page="1">
            <ratings>
                <usersrated value="85000"/>
                <average value="8.05"/>
                <bayesaverage value="7.91"/>
                <ranks>
                    <rank type="subtype" id="1" name="boardgame" friendlyname="Board Game Rank" value="28" bayesaverage="7.91"/>
                    <rank type="family" id="5499" name="familygames" friendlyname="Family Game Rank" value="4" bayesaverage="7.9"/>
                </ranks>
            </ratings>
        </statistics>
    </item>
</items>
"""

EXPANSIONS_XML = """<?xml version="1.0" encoding="utf-8"?>
<items termsofuse="https://boardgamegeek.com/xmlapi/termsofuse">
    <item type="boardgameexpansion" id="290837">
        <name type="primary" sortindex="1" value="Wingspan: European Expansion"/>
        <yearpublished value="2019"/>
        <link type="boardgameexpansion" id="266192" value="Wingspan" inbound="true"/>
        <statistics page="1">
            <ratings>
                <usersrated value="12000"/>
                <average value="8.1"/>
                <ranks>
                    <rank type="subtype" id="1" name="boardgame" friendlyname="Board Game Rank" value="Not Ranked" bayesaverage="Not Ranked"/>
                </ranks>
            </ratings>
        </statistics>
    </item>
    <item type="boardgameexpansion" id="300905">
        <name type="primary" sortindex="1" value="Wingspan: Oceania Expansion"/>
        <yearpublished value="2020"/>
    </item>
</items>
"""

NO_EXPANSIONS_THING_XML = """<?xml version="1.0" encoding="utf-8"?>
<items termsofuse="https://boardgamegeek.com/xmlapi/termsofuse">
    <item type="boardgame" id="13">
        <name type="primary" sortindex="1" value="CATAN"/>
        <yearpublished value="1995"/>
        <link type="boardgamepublisher" id="37" value="KOSMOS"/>
    </item>
</items>
"""

VERSIONS_XML = """<?xml version="1.0" encoding="utf-8"?>
<items termsofuse="https://boardgamegeek.com/xmlapi/termsofuse">
    <item type="boardgame" id="266192">
        <name type="primary" sortindex="1" value="Wingspan"/>
        <versions>
            <item type="boardgameversion" id="454012">
                <thumbnail>https://cf.geekdo-images.com/v1_thumb.jpg</thumbnail>
                <image>https://cf.geekdo-images.com/v1.jpg</image>
                <link type="boardgameversion" id="266192" value="Wingspan" inbound="true"/>
                <link type="boardgamepublisher" id="23202" value="Stonemaier Games"/>
                <name type="primary" sortindex="1" value="English first edition"/>
                <yearpublished value="2019"/>
            </item>
            <item type="boardgameversion" id="500001">
                <link type="boardgamepublisher" id="37" value="Feuerland Spiele"/>
            </item>
        </versions>
    </item>
</items>
"""


class FakeResponse:
    def __init__(self, content: str | bytes, status_code: int = 200):
        self.content = content.encode("utf-8") if isinstance(content, str) else content
        self.status_code = status_code


class FakeSession:
    """Stands in for ``requests.Session``; ``handler(url, params)`` builds each response."""

    def __init__(self, handler: Callable[[str, dict], Any]):
        self.handler = handler
        self.headers: dict[str, str] = {}
        self.calls: list[tuple[str, dict, Any]] = []

    def get(self, url, params=None, timeout=None):
        params = dict(params or {})
        self.calls.append((url, params, timeout))
        result = self.handler(url, params)
        if isinstance(result, Exception):
            raise result
        return result


def respond_with(body: str, status_code: int = 200) -> Callable[[str, dict], FakeResponse]:
    return lambda url, params: FakeResponse(body, status_code)


def routed(thing_bodies: dict[str, str], search_body: str = SEARCH_XML) -> Callable[[str, dict], FakeResponse]:
    """Serve ``/search`` with ``search_body`` and ``/thing`` by the requested id list."""

    def handler(url: str, params: dict) -> FakeResponse:
        if url.endswith("/search"):
            return FakeResponse(search_body)
        key = params.get("id", "")
        if params.get("versions") == "1":
            key = f"versions:{key}"
        return FakeResponse(thing_bodies.get(key, EMPTY_ITEMS_XML))

    return handler


RANKS_CSV_ROWS = [
    "id,name,yearpublished,rank,bayesaverage,average,is_expansion",
    "174430,Gloomhaven,2017,1,8.4,8.6,0",
    "266192,Wingspan,2019,28,7.9,8.0,0",
    "290837,Wingspan: European Expansion,2019,0,0,8.1,1",
    "366161,Wingspan Asia,2022,,6.9,7.8,0",
    "13,CATAN,1995,500,7.0,7.1,0",
    "42,,2001,12,7.0,7.1,0",
    ",Nameless Row Without Id,2001,3,7.0,7.1,0",
    "123,Bowling Wings,abc,-4,not-a-number,,0",
]

