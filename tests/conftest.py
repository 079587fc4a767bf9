from collections.abc import Callable

import pytest

from dialog_localizer.database.models import DialogStringRecord
from dialog_localizer.glossary.matcher import GlossaryMatcher
from dialog_localizer.glossary.models import GlossaryTerm

SAMPLE_SST_XML = b"""<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<SSTXMLRessources>
  <Params>
    <Addon>skyrim</Addon>
    <Source>english</Source>
    <Dest>indonesian</Dest>
    <Version>2</Version>
  </Params>
  <Content>
    <String List="0" sID="000001">
      <Source>Welcome to Whiterun, traveler.</Source>
      <Dest></Dest>
    </String>
    <String List="1" sID="000002">
      <Source>  He said &lt;Alias=Player&gt; "hi"  </Source>
      <Dest>Dia berkata</Dest>
    </String>
  </Content>
</SSTXMLRessources>
"""


@pytest.fixture()
def glossary_terms() -> list[GlossaryTerm]:
    return [
        GlossaryTerm(id="a1", term="Whiterun", category="Location"),
        GlossaryTerm(id="s1", term="Skyrim", category="Location"),
        GlossaryTerm(id="s2", term="Skyrim Hold", category="Location"),
        GlossaryTerm(id="u1", term="Ulfric Stormcloak", category="Name"),
        GlossaryTerm(id="f1", term="Stormcloaks", category="Faction"),
    ]


@pytest.fixture()
def matcher(glossary_terms: list[GlossaryTerm]) -> GlossaryMatcher:
    return GlossaryMatcher(glossary_terms)


@pytest.fixture()
def sample_sst_xml() -> bytes:
    return SAMPLE_SST_XML


RecordFactory = Callable[..., DialogStringRecord]


@pytest.fixture()
def make_record() -> RecordFactory:
    def _make(
        record_id: int = 1,
        source: str | None = "Hello",
        dest: str | None = "",
        masked_source: str | None = None,
    ) -> DialogStringRecord:
        return DialogStringRecord(
            id=record_id,
            file_id=1,
            s_id=f"{record_id:06d}",
            list_id="0",
            source=source,
            dest=dest,
            masked_source=masked_source,
        )

    return _make
