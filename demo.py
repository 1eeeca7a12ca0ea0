#!/usr/bin/env python3
"""
cfg-adguard-dns - Demo Script

This script walks through activate, status and deactivate against a
temporary head file, using the mock lookup provider and no resolvconf
refresh, so it is safe to run without root.
"""

import os
import tempfile

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from cfg_adguard_dns.core.dns_manager import AdGuardDNSManager

# Initialize rich console
console = Console()

ACTIVE_LOOKUP_OUTPUT = (
    "Server:\t\t94.140.14.14\n"
    "Address:\t94.140.14.14#53\n\n"
    "Non-authoritative answer:\n"
    "Name:\twikipedia.org\n"
    "Address: 185.15.58.224\n"
)

INACTIVE_LOOKUP_OUTPUT = (
    "Server:\t\t127.0.0.53\n"
    "Address:\t127.0.0.53#53\n\n"
    "Non-authoritative answer:\n"
    "Name:\twikipedia.org\n"
    "Address: 185.15.58.224\n"
)


def create_demo_config(lookup_output):
    """Create a demo configuration with the mock provider."""
    return {
        "reload_command": None,
        "lookup": {"provider": "mock", "output": lookup_output},
    }


def display_demo_header():
    """Display the demo header."""
    console.print(
        Panel.fit(
            "[bold blue]cfg-adguard-dns - Demo[/bold blue]\n"
            "[cyan]Toggling AdGuard DNS in a temporary resolvconf head file[/cyan]",
            border_style="blue",
        )
    )
    console.print()


def display_head_file(path, title):
    """Display the head file content."""
    with open(path, "r") as f:
        content = f.read()

    console.print(Panel(Text(content or "(empty)"), title=title, border_style="green"))
    console.print()


def run_step(path, action, lookup_output):
    """Open the head file for writing and run one manager action."""
    manager = AdGuardDNSManager(create_demo_config(lookup_output))
    if action == "status":
        return manager.show_status()

    with open(path, "w") as file:
        if action == "activate":
            manager.activate(file)
        else:
            manager.deactivate(file)
    return None


def main():
    """Main demo function."""
    display_demo_header()

    fd, path = tempfile.mkstemp(prefix="resolvconf-head-")
    os.close(fd)

    try:
        console.print("[bold]Activating AdGuard DNS...[/bold]")
        run_step(path, "activate", ACTIVE_LOOKUP_OUTPUT)
        display_head_file(path, "Head file after activate")

        table = Table(title="Status checks")
        table.add_column("Resolver answering", style="cyan")
        table.add_column("Verdict", style="magenta")

        for server, output in (
            ("94.140.14.14", ACTIVE_LOOKUP_OUTPUT),
            ("127.0.0.53", INACTIVE_LOOKUP_OUTPUT),
        ):
            active = run_step(path, "status", output)
            table.add_row(server, "activated" if active else "deactivated")

        console.print(table)
        console.print()

        console.print("[bold]Deactivating AdGuard DNS...[/bold]")
        run_step(path, "deactivate", INACTIVE_LOOKUP_OUTPUT)
        display_head_file(path, "Head file after deactivate")

    except Exception as e:
        console.print(f"[red]Demo failed with error: {e}[/red]")

    finally:
        os.remove(path)
        console.print("[bold blue]Demo completed![/bold blue]")


if __name__ == "__main__":
    main()
