"""System identity collector."""

import getpass
import platform
import socket

import distro

from .base import UNKNOWN, query


def _or_unknown(value: str) -> str:
    # Empty answers from the platform count as missing
    if not value:
        raise ValueError("empty value")
    return value


def get_username() -> str:
    """Return the login name of the current user, or "unknown"."""
    return query(lambda: _or_unknown(getpass.getuser()), UNKNOWN, "username")


def get_hostname() -> str:
    """Return the host name, or "unknown"."""
    return query(lambda: _or_unknown(socket.gethostname()), UNKNOWN, "hostname")


def get_os_name() -> str:
    """Return the distribution's pretty name, falling back to the OS family."""
    return query(
        lambda: _or_unknown(distro.name(pretty=True) or platform.system()),
        UNKNOWN,
        "OS name",
    )


def get_kernel_version() -> str:
    """Return the kernel release string, or "unknown"."""
    return query(lambda: _or_unknown(platform.release()), UNKNOWN, "kernel version")
