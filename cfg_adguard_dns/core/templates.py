"""
Templates - Static content written to the resolvconf head file

The head file is always fully overwritten with one of two fixed bodies:
the resolvconf disclaimer alone, or the disclaimer followed by the
AdGuard DNS nameserver block.
"""

RESOLVCONF_HEAD_ENV_VAR = "RESOLVCONF_HEAD_PATH"
RESOLVCONF_HEAD_DEFAULT_PATH = "/etc/resolvconf/resolv.conf.d/head"

DEFAULT_TEMPLATE = """
# Dynamic resolv.conf(5) file for glibc resolver(3) generated by resolvconf(8)
#     DO NOT EDIT THIS FILE BY HAND -- YOUR CHANGES WILL BE OVERWRITTEN
# 127.0.0.53 is the systemd-resolved stub resolver.
# run "systemd-resolve --status" to see details about the actual nameservers.
"""

DNS_SERVER_1_ADDR = "94.140.14.14"
DNS_SERVER_2_ADDR = "94.149.15.15"

ADGUARD_DNS_SERVER_CONFIG = (
    "\n"
    "# AdGuard DNS \n"
    "# https://adguard-dns.com/en/public-dns.html\n"
    f"nameserver {DNS_SERVER_1_ADDR}\n"
    f"nameserver {DNS_SERVER_2_ADDR}\n"
)

# Disclaimer and AdGuard block are joined by a single space
EXTENDED_TEMPLATE = f"{DEFAULT_TEMPLATE} {ADGUARD_DNS_SERVER_CONFIG}"

HELP_MESSAGE = (
    "\n"
    "Usage: sudo cfg-adguard-dns [options...]\n"
    "\n"
    "        --activate      Activate AdGuard DNS server \n"
    "        --deactivate    Deactivate AdGuard DNS server \n"
    "        --status        Shows wether AdGuard DNS server is activated or not\n"
    "        --help          Display the current help message\n"
    "\n"
    "Disclaimer: Using this tool will restore the "
    "/etc/resolvconf/resolv.conf.d/head file to its default state.\n"
)

UNKNOWN_ARGUMENT_MESSAGE = (
    "Unknown argument. Try `cfg-adguard-dns --help` for more information"
)

STATUS_ACTIVATED_MESSAGE = "ADGUARD DNS is activated"
STATUS_DEACTIVATED_MESSAGE = "ADGUARD DNS is deactivated"
LOOKUP_FAILED_MESSAGE = "nslookup is not installed or could not lookup wikipedia.org"

RESOLVCONF_UPDATE_COMMAND = ("resolvconf", "-u")
LOOKUP_COMMAND = "nslookup"
LOOKUP_TARGET = "wikipedia.org"
