"""Custom-resource lifecycle dispatcher for change calendars."""

import logging
from typing import Any, Dict, Optional

from .config import Settings
from .content import ContentResolver
from .models import ReconciliationRequest, RequestType
from .store import DocumentStoreClient

logger = logging.getLogger(__name__)

_KNOWN_REQUEST_TYPES = {request_type.value for request_type in RequestType}


def on_event(
    event: Dict[str, Any],
    context: Any = None,
    *,
    store: Optional[DocumentStoreClient] = None,
    resolver: Optional[ContentResolver] = None,
    settings: Optional[Settings] = None,
) -> Dict[str, Any]:
    """
    Reconcile the SSM change calendar for one provider event.

    Create and Update resolve the calendar body, then create or update the
    document. Delete removes the document without touching the content source.
    Event types outside Create/Update/Delete are acknowledged without any call.

    Collaborators are built from settings when not injected. Every failure
    propagates to the provider framework, which marks the operation failed.

    Args:
        event: Provider onEvent request
        context: Lambda context (unused)
        store: Document store client
        resolver: Content resolver
        settings: Runtime settings used to build default collaborators

    Returns:
        Empty response dict
    """
    request_type = event.get("RequestType")
    if request_type not in _KNOWN_REQUEST_TYPES:
        logger.warning(f"Ignoring unsupported request type: {request_type!r}")
        return {}

    request = ReconciliationRequest.from_event(event)
    name = request.document_name

    session = None
    if store is None:
        session = (settings or Settings.from_env()).create_session()
        store = DocumentStoreClient(session.client("ssm"))

    if request_type == RequestType.DELETE:
        store.delete(name)
        return {}

    if resolver is None:
        session = session or (settings or Settings.from_env()).create_session()
        resolver = ContentResolver(client_factory=session.client)

    content = resolver.resolve(request.properties)

    if request_type == RequestType.CREATE:
        store.create(name, content)
    else:
        store.update(name, content)

    return {}
