from dataclasses import dataclass, field


@dataclass(frozen=True)
class SstParams:
    """The <Params> block of an SST XML string table."""

    addon: str | None = None
    source: str | None = None
    dest: str | None = None
    version: int | None = None


@dataclass(frozen=True)
class SstString:
    """One <String> entry."""

    s_id: str
    list_id: str = "0"
    source: str = ""
    dest: str = ""


@dataclass
class SstDocument:
    """A parsed SST XML string table."""

    params: SstParams
    strings: list[SstString] = field(default_factory=list)
