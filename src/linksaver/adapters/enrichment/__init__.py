"""Content enrichment adapters."""

from linksaver.adapters.enrichment.jina_reader import JinaReaderClient

__all__ = ["JinaReaderClient"]
