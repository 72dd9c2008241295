# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-09
# Description: AppContainer.py
# -----------------------------------------------------------------------------
from typing import Callable, Optional

import settings
from config.Config import Config
from ingestion.PartitionProjector import IdSource, PartitionProjector
from services.SymQueryService import SymQueryService
from services.SymUploadService import SymUploadService, print_report
from vectorstore.CurlVectorTransport import CurlVectorTransport
from vectorstore.HttpxVectorTransport import HttpxVectorTransport
from vectorstore.PineconeSymbolVectorStore import PineconeSymbolVectorStore
from vectorstore.VectorTransport import VectorTransport


class AppContainer:
    """
    Owns object instantiation and wiring for one CLI run.
    Config is resolved (and validated) before any transport is created.
    """

    def __init__(
        self,
        cfg: Config,
        *,
        transport_kind: str = settings.TRANSPORT,
        batch_size: int = settings.BATCH_SIZE,
        type_id_source: str = settings.TYPE_ID_SOURCE,
        timeout: Optional[float] = settings.HTTP_TIMEOUT,
        report: Callable[[str], None] = print_report,
        transport: Optional[VectorTransport] = None,
    ) -> None:
        # Configuration
        self.cfg = cfg

        # Core infrastructure
        self.transport = transport or self.build_transport(cfg, transport_kind, timeout)
        self.store = PineconeSymbolVectorStore(transport=self.transport)
        self.projector = PartitionProjector(type_id_source=IdSource(type_id_source))

        self.upload_service = SymUploadService(
            store=self.store,
            projector=self.projector,
            batch_size=batch_size,
            name_namespace=settings.NAME_NAMESPACE,
            type_namespace=settings.TYPE_NAMESPACE,
            report=report,
        )
        self.query_service = SymQueryService(
            store=self.store,
            default_namespace=settings.NAME_NAMESPACE,
        )

    @staticmethod
    def build_transport(cfg: Config, kind: str, timeout: Optional[float]) -> VectorTransport:
        if kind == "curl":
            return CurlVectorTransport(
                cfg,
                service_domain=settings.SERVICE_DOMAIN,
                curl_bin=settings.CURL_BIN,
                timeout=timeout,
            )
        return HttpxVectorTransport(cfg, service_domain=settings.SERVICE_DOMAIN, timeout=timeout)

    def close(self) -> None:
        self.store.close()
