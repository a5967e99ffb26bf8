"""SOAP envelope codec.

Encodes an ordered request mapping into a SOAP envelope and decodes reply
envelopes into plain nested dicts keyed by local element names.
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from decimal import Decimal
from enum import Enum
from typing import Any, Mapping

from akbank_transfer.domain.transfer.exceptions import SoapFaultError, TransportFailure

SOAP_11_NS = "http://schemas.xmlsoap.org/soap/envelope/"
SOAP_12_NS = "http://www.w3.org/2003/05/soap-envelope"
XSI_NS = "http://www.w3.org/2001/XMLSchema-instance"

ENVELOPE_NAMESPACES = {"1.1": SOAP_11_NS, "1.2": SOAP_12_NS}

# Fields typed xs:int by the service
INTEGER_FIELDS = frozenset({"ReturnCode"})

_CANONICAL_INT = re.compile(r"0|-?[1-9][0-9]*")


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _text(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)


def _append(parent: ET.Element, name: str, value: Any, namespace: str) -> None:
    element = ET.SubElement(parent, f"{{{namespace}}}{name}")
    if isinstance(value, Mapping):
        for key, child in value.items():
            _append(element, key, child, namespace)
        return
    element.text = _text(value)


def build_envelope(
    operation: str,
    request: Mapping[str, Any],
    *,
    namespace: str,
    soap_version: str = "1.1",
    encoding: str = "UTF-8",
) -> bytes:
    """Serialize ``request`` as the body of ``<operation>``.

    Mapping order is preserved; ``None`` becomes an empty element.
    """
    soap_ns = ENVELOPE_NAMESPACES[soap_version]
    ET.register_namespace("soapenv", soap_ns)
    ET.register_namespace("tns", namespace)

    envelope = ET.Element(f"{{{soap_ns}}}Envelope")
    ET.SubElement(envelope, f"{{{soap_ns}}}Header")
    body = ET.SubElement(envelope, f"{{{soap_ns}}}Body")
    _append(body, operation, request, namespace)

    return ET.tostring(envelope, encoding=encoding, xml_declaration=True)


def _decode_scalar(element: ET.Element) -> Any:
    if element.get(f"{{{XSI_NS}}}nil") in ("true", "1"):
        return None
    text = element.text or ""
    name = _local_name(element.tag)
    if name in INTEGER_FIELDS and _CANONICAL_INT.fullmatch(text):
        return int(text)
    return text


def _decode(element: ET.Element) -> Any:
    children = list(element)
    if not children:
        return _decode_scalar(element)
    grouped: dict[str, list[Any]] = {}
    for child in children:
        grouped.setdefault(_local_name(child.tag), []).append(_decode(child))
    # Repeated siblings decode to a list in document order
    return {
        name: values[0] if len(values) == 1 else values
        for name, values in grouped.items()
    }


def _find_body(envelope: ET.Element) -> ET.Element | None:
    for child in envelope:
        if _local_name(child.tag) == "Body":
            return child
    return None


def _raise_fault(fault: ET.Element, operation: str | None) -> None:
    values: dict[str, str] = {}
    for element in fault.iter():
        name = _local_name(element.tag)
        text = (element.text or "").strip()
        # SOAP 1.1: faultcode/faultstring, SOAP 1.2: Code/Value, Reason/Text
        if name in ("faultcode", "Value") and text:
            values.setdefault("code", text)
        elif name in ("faultstring", "Text") and text:
            values.setdefault("reason", text)
    raise SoapFaultError(
        fault_string=values.get("reason", "SOAP fault"),
        fault_code=values.get("code"),
        operation=operation,
    )


def parse_envelope(content: bytes, operation: str | None = None) -> dict[str, Any]:
    """Decode a reply envelope into the children of its response element.

    For ``<EftTransferResponse><EftTransferResult>...`` this returns
    ``{"EftTransferResult": {...}}``.

    Raises
    ------
    SoapFaultError
        If the body carries a SOAP fault
    TransportFailure
        If the content is not a SOAP envelope
    """
    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        msg = f"Malformed SOAP response: {e}"
        raise TransportFailure(msg, operation=operation) from e

    body = _find_body(root)
    if body is None or len(body) == 0:
        msg = "SOAP response has no body"
        raise TransportFailure(msg, operation=operation)

    response = body[0]
    if _local_name(response.tag) == "Fault":
        _raise_fault(response, operation)

    decoded = _decode(response)
    if not isinstance(decoded, dict):
        return {}
    return decoded
