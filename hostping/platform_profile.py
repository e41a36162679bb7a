# hostping/platform_profile.py
"""
Platform profiles for the OS `ping` executable.

A profile records everything that differs between the Unix-family `ping` and
the Windows `ping`:
 - the arguments placed before the host (three echo requests; Unix also
   shortens the interval to 0.2s)
 - which streams carry error diagnostics
 - the literal substrings that signal a DNS-layer failure

The DNS signals are locale- and version-sensitive. They live here as data so
that supporting another `ping` variant means adding rows, not code.

Selection order:
 1) explicit family name (CLI --platform)
 2) HOSTPING_PLATFORM env var
 3) platform.system()
"""

import logging
import os
import platform
from dataclasses import dataclass

from .outcome_kinds import DNS_NO_ENTRY, DNS_NOT_HOSTNAME, FAMILY_UNIX, FAMILY_WINDOWS

LOG = logging.getLogger(__name__)

# (stream, substring, signal kind); checked in order, first match wins
DNS_SIGNALS = (
    ("stdout", "could not find host", DNS_NO_ENTRY),
    ("stderr", "not known", DNS_NO_ENTRY),
    ("stderr", "associated with hostname", DNS_NOT_HOSTNAME),
)


@dataclass(frozen=True)
class PlatformProfile:
    family: str
    ping_args: tuple
    error_streams: tuple
    dns_signals: tuple = DNS_SIGNALS

    def command(self, ping_cmd, host):
        """Full argv for one probe of host."""
        return [ping_cmd, *self.ping_args, host]


UNIX_PROFILE = PlatformProfile(
    family=FAMILY_UNIX,
    ping_args=("-c", "3", "-i", "0.2"),
    error_streams=("stderr",),
)

# Windows ping has no sub-second interval flag and may report errors on
# either stream.
WINDOWS_PROFILE = PlatformProfile(
    family=FAMILY_WINDOWS,
    ping_args=("-n", "3"),
    error_streams=("stdout", "stderr"),
)

PROFILES = {
    FAMILY_UNIX: UNIX_PROFILE,
    FAMILY_WINDOWS: WINDOWS_PROFILE,
}


def get_profile(family):
    """Return the profile registered for family, raising ValueError if unknown."""
    key = (family or "").strip().lower()
    try:
        return PROFILES[key]
    except KeyError:
        raise ValueError(
            f"Unknown platform family {family!r}; expected one of {', '.join(sorted(PROFILES))}"
        ) from None


def select_profile(family=None):
    if family:
        return get_profile(family)

    env = os.environ.get("HOSTPING_PLATFORM")
    if env:
        LOG.debug("Using HOSTPING_PLATFORM=%s", env)
        return get_profile(env)

    system = platform.system().lower()
    if system.startswith("windows"):
        return WINDOWS_PROFILE
    return UNIX_PROFILE
