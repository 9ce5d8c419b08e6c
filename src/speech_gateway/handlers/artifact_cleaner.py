"""Best-effort removal of request artifacts."""

import os

from speech_gateway.domain import CleanupReport, RemoteObject
from speech_gateway.exceptions import StorageDeleteError
from speech_gateway.interfaces import StorageClient
from speech_gateway.logging import setup_logging

logger = setup_logging()


class ArtifactCleaner:
    """Deletes local temp files and the remote hand-off object."""

    def __init__(self, storage: StorageClient):
        self._storage = storage

    def clean(
        self, local_paths: list[str], remote: RemoteObject | None = None
    ) -> CleanupReport:
        """
        Deletes every given artifact, continuing past failures.

        Failures are logged and recorded in the report; nothing is raised.
        """
        report = CleanupReport()

        for path in dict.fromkeys(local_paths):
            self._remove_local(path, report)

        if remote is not None:
            self._remove_remote(remote, report)

        if report.ok:
            logger.info("Cleanup complete", extra={"deleted": report.deleted})
        else:
            logger.warning(
                "Cleanup incomplete",
                extra={"deleted": report.deleted, "failed": report.failed},
            )
        return report

    def _remove_local(self, path: str, report: CleanupReport) -> None:
        try:
            os.remove(path)
            report.deleted.append(path)
        except FileNotFoundError:
            report.missing.append(path)
        except OSError:
            logger.exception("Error deleting file", extra={"path": path})
            report.failed.append(path)

    def _remove_remote(self, remote: RemoteObject, report: CleanupReport) -> None:
        try:
            self._storage.delete(remote.object_name)
            report.deleted.append(remote.uri)
        except StorageDeleteError:
            report.failed.append(remote.uri)
        except Exception:
            logger.exception("Error deleting remote object", extra={"uri": remote.uri})
            report.failed.append(remote.uri)
