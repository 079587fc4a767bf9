import xml.etree.ElementTree as ET
from pathlib import Path

from dialog_localizer.sst.models import SstDocument
from dialog_localizer.sst.reader import ROOT_TAG

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'


def build_sst(document: SstDocument) -> str:
    """Serialize a document as pretty-printed SST XML, declaration included."""
    root = ET.Element(ROOT_TAG)

    params = ET.SubElement(root, "Params")
    _text_child(params, "Addon", document.params.addon)
    _text_child(params, "Source", document.params.source)
    _text_child(params, "Dest", document.params.dest)
    _text_child(
        params,
        "Version",
        None if document.params.version is None else str(document.params.version),
    )

    content = ET.SubElement(root, "Content")
    for entry in document.strings:
        el = ET.SubElement(content, "String", {"List": entry.list_id, "sID": entry.s_id})
        _text_child(el, "Source", entry.source)
        _text_child(el, "Dest", entry.dest)

    ET.indent(root, space="  ")
    return f"{XML_DECLARATION}\n{ET.tostring(root, encoding='unicode')}\n"


def write_sst_file(path: Path, document: SstDocument) -> None:
    path.write_text(build_sst(document), encoding="utf-8")


def _text_child(parent: ET.Element, tag: str, text: str | None) -> None:
    child = ET.SubElement(parent, tag)
    if text:
        child.text = text
