"""
/**
 * @file deeplx/services/client_pool_service.py
 * @description 出站 HTTP 客户端池：每个代理一个 requests.Session，轮询取用。
 * @note 轮询游标通过 compare-and-swap 重试循环更新，锁只保护比较与赋值本身。
 */
"""

from __future__ import annotations

import logging
import socket
import threading
from typing import Dict, List, Optional, Sequence

import requests
from requests.adapters import HTTPAdapter
from urllib3.connection import HTTPConnection

from deeplx.errors import InternalError
from deeplx.utils import is_valid_proxy_url


logger = logging.getLogger(__name__)

KEEP_ALIVE = 75
CONNECTION_TIMEOUT = 10
TIMEOUT = 360
# FastAPI runs sync endpoints on a ~40 worker threadpool
POOL_MAXSIZE = 64

DEFAULT_HEADERS: Dict[str, str] = {
    "User-Agent": (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/121.0.0.0 Safari/537.36"
    ),
    "Accept": "*/*",
    "Accept-Language": "en-US,en;q=0.9",
    "Accept-Encoding": "gzip, deflate, br",
    "Origin": "https://www.deepl.com",
    "Referer": "https://www.deepl.com/",
}


def _keepalive_socket_options() -> list:
    options = list(HTTPConnection.default_socket_options)
    options.append((socket.SOL_SOCKET, socket.SO_KEEPALIVE, 1))
    # TCP_KEEPIDLE is Linux only, macOS calls it TCP_KEEPALIVE
    idle_opt = getattr(socket, "TCP_KEEPIDLE", None) or getattr(socket, "TCP_KEEPALIVE", None)
    if idle_opt is not None:
        options.append((socket.IPPROTO_TCP, idle_opt, KEEP_ALIVE))
    if hasattr(socket, "TCP_KEEPINTVL"):
        options.append((socket.IPPROTO_TCP, socket.TCP_KEEPINTVL, KEEP_ALIVE))
    return options


class KeepAliveAdapter(HTTPAdapter):
    """HTTPAdapter whose pooled sockets enable TCP keep-alive probes."""

    def init_poolmanager(self, *args, **kwargs):
        kwargs["socket_options"] = _keepalive_socket_options()
        super().init_poolmanager(*args, **kwargs)

    def proxy_manager_for(self, proxy, **proxy_kwargs):
        proxy_kwargs.setdefault("socket_options", _keepalive_socket_options())
        return super().proxy_manager_for(proxy, **proxy_kwargs)


class OutboundClient:
    """One preconfigured session, optionally pinned to an egress proxy."""

    def __init__(self, proxy: Optional[str] = None, session: Optional[requests.Session] = None):
        self.proxy = proxy
        self.timeout = (CONNECTION_TIMEOUT, TIMEOUT)
        self.session = session or self._build_session(proxy)

    @staticmethod
    def _build_session(proxy: Optional[str]) -> requests.Session:
        session = requests.Session()
        session.headers.clear()
        session.headers.update(DEFAULT_HEADERS)
        adapter = KeepAliveAdapter(pool_maxsize=POOL_MAXSIZE)
        session.mount("https://", adapter)
        session.mount("http://", adapter)
        if proxy:
            session.proxies = {"http": proxy, "https": proxy}
            # env proxies must not override the pinned one
            session.trust_env = False
        return session

    def post(self, url: str, data: bytes, headers: Dict[str, str]) -> requests.Response:
        return self.session.post(
            url,
            data=data,
            headers=headers,
            timeout=self.timeout,
            allow_redirects=False,
        )

    def __repr__(self) -> str:
        return f"OutboundClient(proxy={self.proxy!r})"


class AtomicCounter:
    def __init__(self, value: int = 0):
        self._value = value
        self._lock = threading.Lock()

    def load(self) -> int:
        return self._value

    def compare_and_swap(self, expected: int, new: int) -> bool:
        with self._lock:
            if self._value != expected:
                return False
            self._value = new
            return True


class ClientPool:
    def __init__(self, clients: Sequence[OutboundClient]):
        if not clients:
            raise InternalError("Client pool needs at least one client")
        self._clients: List[OutboundClient] = list(clients)
        self._cursor = AtomicCounter(0)

    @classmethod
    def from_proxies(cls, proxies: Optional[Sequence[str]] = None) -> "ClientPool":
        proxies = [p for p in (proxies or []) if p]
        if not proxies:
            logger.info("Client pool: 1 direct client")
            return cls([OutboundClient()])

        clients = []
        for proxy in proxies:
            if not is_valid_proxy_url(proxy):
                raise InternalError(f"Invalid proxy address: {proxy}")
            clients.append(OutboundClient(proxy=proxy))
        logger.info(f"Client pool: {len(clients)} proxied clients")
        return cls(clients)

    def __len__(self) -> int:
        return len(self._clients)

    @property
    def clients(self) -> List[OutboundClient]:
        return list(self._clients)

    @property
    def cursor(self) -> int:
        return self._cursor.load()

    def next(self) -> OutboundClient:
        if len(self._clients) == 1:
            return self._clients[0]

        size = len(self._clients)
        old = self._cursor.load()
        while True:
            new = (old + 1) % size
            if self._cursor.compare_and_swap(old, new):
                return self._clients[new]
            old = self._cursor.load()
