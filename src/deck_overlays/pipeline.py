"""Main overlay generation orchestration.

Pipeline flow:
    1. Capture a snapshot of the document
    2. Initialize the resource cache (once) and start a new identifier run
    3. Classify elements and build the section index
    4. Queue deletions of previously generated overlays
    5. Run each generator in fixed order
    6. Submit the batch in a single call
"""

import logging
from typing import Optional

from .config import Config
from .deletion import build_deletions
from .element_index import ElementIndex
from .executor import BatchExecutor, BatchResult, MutationClient
from .generators import GENERATORS, GeneratorContext
from .resource_cache import ResourceCache
from .section_index import build_section_index
from .snapshot import DocumentSnapshot
from .style import OverlayStyle

logger = logging.getLogger(__name__)


class OverlayPipeline:
    """Regenerates every overlay of a document in one batch.

    The resource cache outlives a single run: pass a long-lived instance to
    share it across runs, and call ``cache.clear()`` when the palette or the
    target document changes.
    """

    def __init__(self, config: Optional[Config] = None, cache: Optional[ResourceCache] = None):
        """Initialize the pipeline.

        Args:
            config: Configuration with palette and style settings. Defaults
                apply when omitted.
            cache: Resource cache to reuse; a private one is created if omitted.
        """
        self.config = config
        self.cache = cache if cache is not None else ResourceCache()
        self._style: Optional[OverlayStyle] = None

    @property
    def style(self) -> OverlayStyle:
        """Lazy-load the overlay style from configuration."""
        if self._style is None:
            self._style = OverlayStyle.from_config(self.config) if self.config else OverlayStyle()
        return self._style

    def run(self, document, client: MutationClient) -> BatchResult:
        """Regenerate all overlays of ``document`` and submit them through ``client``.

        Args:
            document: Document handle (see ``snapshot`` module).
            client: Mutation interface receiving the single batch.

        Returns:
            BatchResult describing what was submitted.
        """
        snapshot = DocumentSnapshot.capture(document)
        if snapshot.is_empty:
            return BatchResult()

        logger.info(f"Generating overlays for {snapshot.slide_count} slides")

        palette = self.config.palette if self.config else None
        self.cache.initialize(palette)
        self.cache.start_run()

        elements = ElementIndex.build(snapshot)
        sections = build_section_index(snapshot, elements, self.style.section_layouts)
        deletions = build_deletions(snapshot, elements)

        ctx = GeneratorContext(
            snapshot=snapshot,
            cache=self.cache,
            sections=sections,
            elements=elements,
            style=self.style,
        )

        groups = [deletions]
        for name, generator in GENERATORS:
            if not self.style.is_enabled(name):
                logger.info(f"  Generator '{name}' disabled")
                continue
            ops = generator(ctx)
            logger.debug(f"  {name}: {len(ops)} operations")
            groups.append(ops)

        executor = BatchExecutor(client)
        batch = executor.assemble(*groups)
        result = executor.submit(batch)

        logger.info(
            f"Overlay run finished: {len(deletions)} deletions, "
            f"{result.operation_count} operations total"
        )
        return result
