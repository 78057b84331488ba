"""Google Slides backend: a hosted presentation as document handle and mutation client.

The presentation is fetched once with ``presentations().get``; overlays are
applied with a single ``presentations().batchUpdate`` call.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from google.oauth2 import service_account
from googleapiclient.discovery import build

from .mutations import MutationOperation, to_requests

logger = logging.getLogger(__name__)

SCOPES = ['https://www.googleapis.com/auth/presentations']

EMU_PER_PT = 12700


def build_slides_service(credentials_file: str):
    """Build a Slides API client from a service account key file."""
    credentials = service_account.Credentials.from_service_account_file(
        credentials_file, scopes=SCOPES
    )
    return build('slides', 'v1', credentials=credentials, cache_discovery=False)


def _to_points(dimension: Optional[dict]) -> float:
    if not dimension:
        return 0.0
    magnitude = float(dimension.get('magnitude', 0.0))
    if dimension.get('unit') == 'EMU':
        return magnitude / EMU_PER_PT
    return magnitude


def _shape_text(shape: dict) -> str:
    parts = []
    for element in shape.get('text', {}).get('textElements', []):
        run = element.get('textRun')
        if run:
            parts.append(run.get('content', ''))
    return ''.join(parts)


class GoogleShape:
    """Document-handle view of one page element."""

    def __init__(self, element: dict):
        self._element = element
        self._shape = element.get('shape', {})

    @property
    def object_id(self) -> str:
        return self._element['objectId']

    @property
    def name(self) -> str:
        return self._element['objectId']

    @property
    def kind(self) -> str:
        return self._shape.get('shapeType', '')

    @property
    def text(self) -> str:
        return _shape_text(self._shape)

    @property
    def label(self) -> str:
        return self._element.get('title', '')

    @property
    def description(self) -> str:
        return self._element.get('description', '')


class GoogleSlide:
    def __init__(self, page: dict, layout_names: dict[str, str]):
        self._page = page
        self._layout_names = layout_names

    @property
    def object_id(self) -> str:
        return self._page['objectId']

    @property
    def layout_name(self) -> str:
        layout_id = self._page.get('slideProperties', {}).get('layoutObjectId', '')
        return self._layout_names.get(layout_id, '')

    @property
    def shapes(self) -> list[GoogleShape]:
        return [
            GoogleShape(element)
            for element in self._page.get('pageElements', [])
            if 'shape' in element
        ]


class GoogleSlidesDocument:
    """A fetched Google Slides presentation exposed as a document handle."""

    def __init__(self, presentation: dict):
        self.presentation = presentation
        self.presentation_id = presentation.get('presentationId', '')
        self._layout_names = {
            layout['objectId']: layout.get('layoutProperties', {}).get('name', '')
            for layout in presentation.get('layouts', [])
        }

    @classmethod
    def fetch(cls, service, presentation_id: str) -> "GoogleSlidesDocument":
        logger.info(f"Fetching presentation {presentation_id}")
        presentation = service.presentations().get(presentationId=presentation_id).execute()
        return cls(presentation)

    @property
    def page_width(self) -> float:
        return _to_points(self.presentation.get('pageSize', {}).get('width'))

    @property
    def page_height(self) -> float:
        return _to_points(self.presentation.get('pageSize', {}).get('height'))

    @property
    def slides(self) -> list[GoogleSlide]:
        return [GoogleSlide(page, self._layout_names) for page in self.presentation.get('slides', [])]


class GoogleSlidesClient:
    """Submits mutation batches through ``presentations().batchUpdate``."""

    def __init__(self, service, presentation_id: str):
        self.service = service
        self.presentation_id = presentation_id

    def batch_update(self, operations: Sequence[MutationOperation]) -> Any:
        body = {'requests': to_requests(list(operations))}
        return (
            self.service.presentations()
            .batchUpdate(presentationId=self.presentation_id, body=body)
            .execute()
        )
