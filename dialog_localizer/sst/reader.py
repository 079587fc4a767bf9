import xml.etree.ElementTree as ET
from pathlib import Path

from dialog_localizer.sst.exceptions import SstFormatError
from dialog_localizer.sst.models import SstDocument, SstParams, SstString

ROOT_TAG = "SSTXMLRessources"


def read_sst_file(path: Path) -> SstDocument:
    """Parse an SST XML file from disk.

    Raises:
        SstFormatError: if the file is not valid SST XML.
        OSError: if the file cannot be read.
    """
    return parse_sst(path.read_bytes())


def parse_sst(data: bytes) -> SstDocument:
    """Parse SST XML bytes. Text content is kept verbatim, whitespace included."""
    try:
        root = ET.fromstring(data)
    except ET.ParseError as exc:
        raise SstFormatError(f"Invalid XML: {exc}") from exc

    if root.tag != ROOT_TAG:
        raise SstFormatError(f"Expected <{ROOT_TAG}> root, got <{root.tag}>")

    params = _parse_params(root.find("Params"))
    content = root.find("Content")
    strings = [] if content is None else [_parse_string(el) for el in content.iter("String")]
    return SstDocument(params=params, strings=strings)


def _parse_params(el: ET.Element | None) -> SstParams:
    if el is None:
        return SstParams()
    return SstParams(
        addon=el.findtext("Addon"),
        source=el.findtext("Source"),
        dest=el.findtext("Dest"),
        version=_parse_version(el.findtext("Version")),
    )


def _parse_version(raw: str | None) -> int | None:
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise SstFormatError(f"Version must be an integer, got {raw!r}") from exc


def _parse_string(el: ET.Element) -> SstString:
    s_id = el.get("sID")
    if not s_id:
        raise SstFormatError("<String> element without sID attribute")
    return SstString(
        s_id=s_id,
        list_id=el.get("List", "0"),
        source=el.findtext("Source") or "",
        dest=el.findtext("Dest") or "",
    )
