"""Delegating proxies: interface forwarding, copy-on-write and fluent builders."""

from sims_util.proxy.builder import BuilderProxy
from sims_util.proxy.copy_on_write import CopyOnWriteProxy
from sims_util.proxy.delegate import DelegatingProxy, public_names

__all__ = [
    "BuilderProxy",
    "CopyOnWriteProxy",
    "DelegatingProxy",
    "public_names",
]
