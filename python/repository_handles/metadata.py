"""Stamp a handle into an object's metadata datastream with XSLT."""

from pathlib import Path
from typing import Any, Optional

from lxml import etree

from .constants import HANDLE_VALUE_PARAM, MetadataMessage, Severity
from .logging_config import get_logger
from .models import MetadataOutcome, OutcomeMessage

logger = get_logger(__name__)

# Bundled stylesheet for MODS records
MODS_STYLESHEET = str(Path(__file__).parent / "stylesheets" / "add_handle_to_mods.xsl")


def content_parser() -> etree.XMLParser:
    """Parser for datastream content already encoded as UTF-8.

    The declared document encoding is overridden and external entities are
    neither resolved nor fetched.
    """
    return etree.XMLParser(encoding="utf-8", resolve_entities=False, no_network=True)


def _failure(message: MetadataMessage, **substitutions: str) -> MetadataOutcome:
    return MetadataOutcome(
        success=False,
        message=OutcomeMessage(
            text=message.value,
            substitutions=substitutions,
            severity=Severity.ERROR,
        ),
    )


def load_stylesheet(xsl_location: str) -> etree.XSLT:
    """Load and compile a stylesheet from a file path or URL.

    Raises:
        OSError: If the location cannot be read
        etree.XMLSyntaxError: If the stylesheet is not well-formed
        etree.XSLTParseError: If the document is not a valid stylesheet
    """
    return etree.XSLT(etree.parse(xsl_location))


def transform_content(
    document: etree._ElementTree, stylesheet: etree.XSLT, handle_value: str
) -> Optional[etree._XSLTResultTree]:
    """Run ``stylesheet`` over ``document`` with the handle_value parameter.

    Returns None when the transform produced no document.

    Raises:
        etree.XSLTApplyError: If the transform aborts
    """
    result = stylesheet(
        document, **{HANDLE_VALUE_PARAM: etree.XSLT.strparam(handle_value)}
    )
    if result.getroot() is None:
        return None
    return result


def append_handle(
    obj: Any, datastream_name: str, xsl_location: str, handle_value: str
) -> MetadataOutcome:
    """Apply the stylesheet at ``xsl_location`` to a datastream of ``obj``.

    The datastream is only written when the transform changed its content,
    so repeated runs do not create new datastream versions.
    """
    pid = str(obj.id)
    try:
        datastream = obj[datastream_name]
    except KeyError:
        logger.error(f"Datastream {datastream_name} not found on {pid}")
        return _failure(
            MetadataMessage.DATASTREAM_MISSING, dsid=datastream_name, pid=pid
        )

    content = datastream.content or ""
    try:
        original = etree.fromstring(
            content.encode("utf-8"), content_parser()
        ).getroottree()
    except (etree.XMLSyntaxError, ValueError) as e:
        logger.error(f"Unable to parse {datastream_name} on {pid}: {e}")
        return _failure(
            MetadataMessage.CONTENT_UNPARSABLE, dsid=datastream_name, pid=pid
        )

    try:
        stylesheet = load_stylesheet(xsl_location)
    except (OSError, etree.XMLSyntaxError, etree.XSLTParseError) as e:
        logger.error(f"Unable to load stylesheet {xsl_location}: {e}")
        return _failure(
            MetadataMessage.STYLESHEET_UNAVAILABLE, xsl=xsl_location, pid=pid
        )

    try:
        result = transform_content(original, stylesheet, handle_value)
    except etree.XSLTApplyError as e:
        logger.error(f"Transform of {datastream_name} on {pid} failed: {e}")
        result = None
    if result is None:
        return _failure(
            MetadataMessage.TRANSFORM_FAILED, dsid=datastream_name, pid=pid
        )

    transformed = str(result)
    unchanged = transformed == content or (
        etree.tostring(result) == etree.tostring(original)
    )
    if unchanged:
        logger.debug(f"{datastream_name} on {pid} already carries {handle_value}")
        return MetadataOutcome(success=True)

    datastream.content = transformed
    logger.info(f"Stamped {handle_value} into {datastream_name} on {pid}")
    return MetadataOutcome(
        success=True,
        message=OutcomeMessage(
            text=MetadataMessage.HANDLE_APPENDED.value,
            substitutions={"pid": pid, "dsid": datastream_name},
            severity=Severity.INFO,
        ),
    )
