# hostping/outcome_kinds.py
"""
Canonical outcome constants used across the project.

Purpose: Avoid brittle string literals scattered in the code and keep the
category tags and exit codes next to the kinds they belong to.
"""

# Outcome kinds
CONNECTION_SUCCESS = "connection_success"
CONNECTION_FAILURE = "connection_failure"
DNS_ISSUE = "dns_issue"
INVOCATION_ISSUE = "invocation_issue"

OUTCOME_KINDS = (CONNECTION_SUCCESS, CONNECTION_FAILURE, DNS_ISSUE, INVOCATION_ISSUE)

# Tags printed in front of the one-line result
CATEGORY_TAGS = {
    CONNECTION_SUCCESS: "CONNECTION SUCCESS",
    CONNECTION_FAILURE: "CONNECTION FAILURE",
    DNS_ISSUE: "DNS FAILURE",
    INVOCATION_ISSUE: "OS PING COMMAND ISSUE",
}

# Process exit codes
EXIT_OK = 0
EXIT_USAGE = 1
EXIT_CODES = {
    CONNECTION_SUCCESS: EXIT_OK,
    CONNECTION_FAILURE: 2,
    DNS_ISSUE: 3,
    INVOCATION_ISSUE: 4,
}

# Spawn error kinds
SPAWN_NOT_FOUND = "not_found"
SPAWN_PERMISSION_DENIED = "permission_denied"
SPAWN_OTHER = "other"

# Platform families
FAMILY_UNIX = "unix"
FAMILY_WINDOWS = "windows"

# DNS signal kinds
DNS_NO_ENTRY = "dns_no_entry"
DNS_NOT_HOSTNAME = "dns_not_hostname"
