# hostping/classifier.py
"""
Outcome classifier.

- classify(raw, host, profile) is a pure function: every ProbeRaw maps to
  exactly one Outcome and nothing is raised.
- A failing ping is data here, not an error.
"""

import logging
from dataclasses import dataclass

from .outcome_kinds import (
    CATEGORY_TAGS,
    CONNECTION_FAILURE,
    CONNECTION_SUCCESS,
    DNS_ISSUE,
    DNS_NOT_HOSTNAME,
    EXIT_CODES,
    FAMILY_UNIX,
    INVOCATION_ISSUE,
    SPAWN_NOT_FOUND,
    SPAWN_PERMISSION_DENIED,
)

logger = logging.getLogger(__name__)

# Unix ping exits 1 only for "no reply"; everything else is 2
UNIX_UNREACHABLE_CODE = 1


@dataclass(frozen=True)
class Outcome:
    kind: str
    detail: str = ""

    @property
    def ok(self):
        return self.kind == CONNECTION_SUCCESS

    @property
    def tag(self):
        return CATEGORY_TAGS[self.kind]

    @property
    def exit_code(self):
        return EXIT_CODES[self.kind]


def decode_output(data):
    """Lossy UTF-8 decode of a captured stream."""
    if not data:
        return ""
    return data.decode("utf-8", errors="replace")


def _one_line(text):
    return " ".join(text.split())


def _os_output(streams, texts):
    parts = [_one_line(texts[name]) for name in streams]
    return " ".join(part for part in parts if part)


def _classify_spawn_error(raw):
    if raw.spawn_error_kind == SPAWN_NOT_FOUND:
        return Outcome(
            INVOCATION_ISSUE,
            "Unable to locate 'ping' executable in the local OS environment - ensure this "
            "executable is on your environment path.  "
            f"OS OUTPUT RECEIVED: '{raw.spawn_error}'",
        )
    if raw.spawn_error_kind == SPAWN_PERMISSION_DENIED:
        return Outcome(
            INVOCATION_ISSUE,
            "Unable to run the 'ping' executable in the local OS environment due to lack "
            "of permissions - ensure the 'ping' command on your OS is assigned with "
            "executable permissions for your OS user running this tool.  "
            f"OS OUTPUT RECEIVED: '{raw.spawn_error}'",
        )
    return Outcome(
        INVOCATION_ISSUE,
        "Unable to invoke the 'ping' executable on the underlying OS.  "
        f"OS OUTPUT RECEIVED: '{raw.spawn_error}'",
    )


def classify(raw, host, profile):
    """
    Turn one ping run into an Outcome.

    Order matters:
      1) spawn failure -> INVOCATION_ISSUE
      2) exit code 0 -> CONNECTION_SUCCESS, whatever the output says
      3) Unix exit code 1 -> CONNECTION_FAILURE, before any output scan
      4) first matching DNS signal of the profile -> DNS_ISSUE
      5) anything else -> CONNECTION_FAILURE with the OS output attached
    """
    if not raw.spawned:
        return _classify_spawn_error(raw)

    if raw.exit_code == 0:
        return Outcome(CONNECTION_SUCCESS)

    if profile.family == FAMILY_UNIX and raw.exit_code == UNIX_UNREACHABLE_CODE:
        return Outcome(
            CONNECTION_FAILURE,
            f"Host '{host}' cannot be reached over a network ICMP Ping",
        )

    texts = {"stdout": decode_output(raw.stdout), "stderr": decode_output(raw.stderr)}

    for stream, needle, signal in profile.dns_signals:
        text = texts.get(stream, "")
        if needle not in text:
            continue
        logger.debug("DNS signal %r found on %s", needle, stream)
        if signal == DNS_NOT_HOSTNAME:
            return Outcome(
                DNS_ISSUE,
                f"Ping returned error indicating the DNS entry for '{host}' is not a hostname "
                f"associated with an IP address.  OS OUTPUT RECEIVED: '{_one_line(text)}'",
            )
        return Outcome(
            DNS_ISSUE,
            f"Ping returned error indicating no DNS entry for '{host}'.  "
            f"OS OUTPUT RECEIVED: '{_one_line(text)}'",
        )

    output = _os_output(profile.error_streams, texts)
    return Outcome(
        CONNECTION_FAILURE,
        f"Ping of host '{host}' returned error (exit code {raw.exit_code}).  "
        f"OS OUTPUT RECEIVED: '{output}'",
    )
