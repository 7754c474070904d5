"""Best-effort audit trail for executed terminal commands.

Records are handed to background tasks and delivered to one or more sinks.
Delivery is attempted once; any failure is logged locally and discarded so it
never reaches the caller that produced the command result.
"""

from __future__ import annotations

import asyncio
import json
import logging
import socket
import threading
import urllib.error
import urllib.request
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Protocol, Sequence, Set

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey, Ed25519PublicKey
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

logger = logging.getLogger("aiden.terminal.audit")

SIGNATURE_ALGORITHM = "ed25519"
_UNSIGNED_FIELDS = ("signature", "signature_algorithm", "key_id")


def _now_utc() -> datetime:
    return datetime.now(timezone.utc)


def _isoformat_utc(dt: datetime) -> str:
    return dt.isoformat().replace("+00:00", "Z")


class AuditDeliveryError(RuntimeError):
    """Raised by a sink when an audit record cannot be delivered."""


class AuditSignatureError(RuntimeError):
    """Raised when an audit payload signature does not verify."""


@dataclass
class AuditRecord:
    command: str
    output: str
    mode: str
    recorded_at: str = field(default_factory=lambda: _isoformat_utc(_now_utc()))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "command": self.command,
            "output": self.output,
            "mode": self.mode,
            "recorded_at": self.recorded_at,
        }


def _canonical_bytes(payload: Mapping[str, Any]) -> bytes:
    body = {key: value for key, value in payload.items() if key not in _UNSIGNED_FIELDS}
    return json.dumps(body, sort_keys=True, ensure_ascii=False).encode("utf-8")


class AuditSigner:
    """Sign audit payloads with an Ed25519 key."""

    def __init__(self, private_key: Ed25519PrivateKey, *, key_id: str = "default") -> None:
        self._private_key = private_key
        self._key_id = key_id

    @classmethod
    def from_seed_hex(cls, seed_hex: str, *, key_id: str = "default") -> "AuditSigner":
        """Load a signer from a 32-byte private key seed encoded as hex."""

        try:
            seed = bytes.fromhex(seed_hex.strip())
        except ValueError as exc:
            raise ValueError("Audit signing key must be hex encoded") from exc
        if len(seed) != 32:
            raise ValueError("Audit signing key must be 32 bytes")
        return cls(Ed25519PrivateKey.from_private_bytes(seed), key_id=key_id)

    @classmethod
    def generate(cls, *, key_id: str = "default") -> "AuditSigner":
        return cls(Ed25519PrivateKey.generate(), key_id=key_id)

    @property
    def key_id(self) -> str:
        return self._key_id

    def public_key_hex(self) -> str:
        raw = self._private_key.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw)
        return raw.hex()

    def sign(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        """Return a copy of *payload* carrying its signature fields."""

        signed = dict(payload)
        signed["signature"] = self._private_key.sign(_canonical_bytes(payload)).hex()
        signed["signature_algorithm"] = SIGNATURE_ALGORITHM
        signed["key_id"] = self._key_id
        return signed


def verify_payload(payload: Mapping[str, Any], public_key_hex: str) -> None:
    """Check the signature carried by *payload* against *public_key_hex*."""

    signature = payload.get("signature")
    if not isinstance(signature, str) or not signature:
        raise AuditSignatureError("Audit payload is missing a signature")
    algorithm = payload.get("signature_algorithm", SIGNATURE_ALGORITHM)
    if algorithm != SIGNATURE_ALGORITHM:
        raise AuditSignatureError(f"Unsupported signature algorithm: {algorithm}")
    try:
        public_key = Ed25519PublicKey.from_public_bytes(bytes.fromhex(public_key_hex))
        public_key.verify(bytes.fromhex(signature), _canonical_bytes(payload))
    except (InvalidSignature, ValueError) as exc:
        raise AuditSignatureError("Signature mismatch for audit payload") from exc


# ---------------------------------------------------------------------------
# Sinks
# ---------------------------------------------------------------------------


class AuditSink(Protocol):
    def send(self, payload: Dict[str, Any]) -> None:
        ...


class HttpAuditSink:
    """POST audit payloads as JSON to a logging endpoint."""

    def __init__(
        self,
        url: str,
        *,
        timeout: float = 5.0,
        user_agent: str = "AIDEN-Terminal/1.0.0",
        opener: Optional[urllib.request.OpenerDirector] = None,
    ) -> None:
        self._url = url
        self._timeout = timeout
        self._user_agent = user_agent
        self._opener = opener or urllib.request.build_opener()

    @property
    def url(self) -> str:
        return self._url

    def send(self, payload: Dict[str, Any]) -> None:
        body = json.dumps(payload, ensure_ascii=False).encode("utf-8")
        headers = {
            "Content-Type": "application/json",
            "User-Agent": self._user_agent,
        }
        signature = payload.get("signature")
        if signature:
            headers["X-Aiden-Signature"] = str(signature)
        request = urllib.request.Request(self._url, data=body, headers=headers, method="POST")
        try:
            with self._opener.open(request, timeout=self._timeout) as response:
                status = getattr(response, "status", 200)
        except urllib.error.URLError as exc:
            raise AuditDeliveryError(f"Audit endpoint unreachable: {exc}") from exc
        except (TimeoutError, socket.timeout) as exc:
            raise AuditDeliveryError(f"Audit endpoint timed out after {self._timeout}s") from exc
        if not 200 <= int(status) < 300:
            raise AuditDeliveryError(f"Audit endpoint returned HTTP {status}")


class JsonlAuditSink:
    """Append audit payloads to a JSON-lines file."""

    def __init__(self, path: Path) -> None:
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def send(self, payload: Dict[str, Any]) -> None:
        line = json.dumps(payload, ensure_ascii=False) + "\n"
        try:
            with self._lock:
                with self._path.open("a", encoding="utf-8") as handle:
                    handle.write(line)
        except OSError as exc:
            raise AuditDeliveryError(f"Failed to append audit record: {exc}") from exc


# ---------------------------------------------------------------------------
# Logger
# ---------------------------------------------------------------------------


class AuditLogger:
    """Fire-and-forget dispatch of audit records to the configured sinks."""

    def __init__(
        self,
        sinks: Sequence[AuditSink] = (),
        *,
        signer: Optional[AuditSigner] = None,
    ) -> None:
        self._sinks: List[AuditSink] = list(sinks)
        self._signer = signer
        self._pending: Set["asyncio.Task[None]"] = set()

    @property
    def enabled(self) -> bool:
        return bool(self._sinks)

    @property
    def pending(self) -> int:
        return len(self._pending)

    def emit(self, record: AuditRecord) -> Optional["asyncio.Task[None]"]:
        """Schedule delivery of *record* without waiting for it."""

        if not self._sinks:
            return None
        try:
            loop = asyncio.get_running_loop()
            task = loop.create_task(self._deliver(record))
        except RuntimeError as exc:
            logger.error("Failed to schedule audit record: %s", exc)
            return None
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _deliver(self, record: AuditRecord) -> None:
        try:
            payload = record.to_dict()
            if self._signer is not None:
                payload = self._signer.sign(payload)
        except Exception as exc:
            logger.error("Failed to prepare audit record: %s", exc)
            return
        for sink in self._sinks:
            try:
                await asyncio.to_thread(sink.send, payload)
            except Exception as exc:
                logger.error("Failed to log command: %s", exc)

    async def drain(self) -> None:
        """Wait for every in-flight delivery to finish."""

        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)


__all__ = [
    "AuditDeliveryError",
    "AuditLogger",
    "AuditRecord",
    "AuditSignatureError",
    "AuditSigner",
    "AuditSink",
    "HttpAuditSink",
    "JsonlAuditSink",
    "verify_payload",
]
