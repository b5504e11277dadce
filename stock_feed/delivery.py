import logging
from contextlib import contextmanager
from ftplib import FTP
from pathlib import Path
from typing import Iterator, Optional

from . import settings
from .exceptions import DeliveryConfigError

logger = logging.getLogger(__name__)


class DeliveryClient:
    """Uploads the feed file to the partner's FTP drop."""

    def __init__(
        self,
        host: Optional[str] = None,
        user: Optional[str] = None,
        password: Optional[str] = None,
        remote_path: Optional[str] = None,
        port: Optional[int] = None,
    ):
        self.host = host or settings.FTP_HOST
        self.user = user or settings.FTP_USER
        self.password = password or settings.FTP_PASSWORD
        self.remote_path = remote_path if remote_path is not None else settings.FTP_REMOTE_PATH
        self.port = port or settings.FTP_PORT

    @contextmanager
    def session(self) -> Iterator[FTP]:
        """An authenticated FTP session, closed on every exit path."""
        if not self.host:
            raise DeliveryConfigError("FTP_HOST not set. Cannot deliver the feed.")

        ftp = FTP()
        try:
            ftp.connect(self.host, self.port)
            ftp.login(self.user or "", self.password or "")
            logger.info(f"Connected to FTP server {self.host}")
            if self.remote_path:
                ftp.cwd(self.remote_path)
            yield ftp
        finally:
            ftp.close()
            logger.info("FTP session closed.")

    def upload(self, local_path: Path) -> str:
        """Stores the file under its own name. Returns the remote filename."""
        local_path = Path(local_path)
        with self.session() as ftp:
            with open(local_path, "rb") as fh:
                ftp.storbinary(f"STOR {local_path.name}", fh)
        logger.info(f"🚀 File uploaded to FTP: {local_path.name}")
        return local_path.name
