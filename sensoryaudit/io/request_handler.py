"""Request boundary: validate an audit payload and shape the response.

The core assumes well-typed input. Shape and range checks live in
:mod:`sensoryaudit.io.schemas`, and every unexpected fault raised by the
core is turned into a single generic failure response without partial
results.
"""

import logging
from typing import Any, Dict, Tuple

from pydantic import ValidationError

from ..config import MAX_MANUSCRIPT_CHARS
from ..core.errors import AuditValidationError, UnresolvedReferenceError
from ..core.models import AuditInput, FlaggedChapter, SensoryBaseline
from ..editor.pipeline import perform_audit
from .schemas import AuditRequest, error_details

logger = logging.getLogger(__name__)

INVALID_INPUT = "Invalid input"
PROCESSING_FAILED = "Failed to process audit"


def parse_audit_request(payload: Any, max_chars: int = MAX_MANUSCRIPT_CHARS) -> AuditInput:
    """Validate a raw request payload and build an :class:`AuditInput`.

    Raises:
        AuditValidationError: listing every problem found.
    """
    try:
        request = AuditRequest.model_validate(payload, context={"max_chars": max_chars})
    except ValidationError as e:
        raise AuditValidationError(error_details(e.errors())) from e

    return AuditInput(
        manuscript_text=request.manuscript_text,
        sensory_baseline=SensoryBaseline.from_dict(request.sensory_baseline.model_dump()),
        chapters_flagged_for_enrichment=[
            FlaggedChapter.from_dict(item.model_dump())
            for item in request.chapters_flagged_for_enrichment or []
        ],
    )


def handle_audit_request(
    payload: Any,
    strict: bool = False,
    max_chars: int = MAX_MANUSCRIPT_CHARS,
) -> Tuple[int, Dict[str, Any]]:
    """Run an audit for a raw payload and return ``(status_code, body)``."""
    try:
        audit_input = parse_audit_request(payload, max_chars=max_chars)
    except AuditValidationError as e:
        logger.warning(f"Rejected audit request: {e}")
        return 400, {"error": INVALID_INPUT, "details": e.details}

    try:
        result = perform_audit(audit_input, strict=strict)
        return 200, result.to_dict()
    except UnresolvedReferenceError as e:
        logger.warning(f"Strict audit failed: {e}")
        return 400, {"error": INVALID_INPUT, "details": [str(e)]}
    except Exception:
        logger.exception("Audit error")
        return 500, {"error": PROCESSING_FAILED}
