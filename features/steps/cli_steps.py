"""
Step definitions for cfg-adguard-dns CLI scenarios.
"""

import io
import os
import subprocess
from unittest.mock import patch

import yaml
from behave import given, when, then

from cfg_adguard_dns.cli.main import main
from cfg_adguard_dns.core.templates import (
    ADGUARD_DNS_SERVER_CONFIG,
    DEFAULT_TEMPLATE,
    EXTENDED_TEMPLATE,
)


def _fake_run(context):
    """Stand in for subprocess.run, recording each command."""

    def run(command, capture_output):
        context.commands.append(command)
        if command[0] in context.missing_commands:
            raise FileNotFoundError(f"No such file or directory: '{command[0]}'")
        stdout = context.lookup_output if command[0] == "nslookup" else b""
        return subprocess.CompletedProcess(command, 0, stdout=stdout, stderr=b"")

    return run


@given("the head file contains")
def step_impl(context):
    """Write existing content into the head file."""
    context.head_path.write_text(context.text + "\n")


@given("the head file directory does not exist")
def step_impl(context):
    """Point the head file at a missing directory."""
    context.head_path = context.temp_dir / "missing" / "head"
    os.environ["RESOLVCONF_HEAD_PATH"] = str(context.head_path)


@given('the "{command}" command is not installed')
def step_impl(context, command):
    """Make spawning the command fail."""
    context.missing_commands.add(command)


@given('nslookup answers through "{server}"')
def step_impl(context, server):
    """Set the nslookup output to name the answering server."""
    context.lookup_output = (
        f"Server:\t\t{server}\nAddress:\t{server}#53\n\n"
        "Non-authoritative answer:\nName:\twikipedia.org\nAddress: 185.15.58.224\n"
    ).encode("utf-8")


@given("nslookup prints bytes that are not text")
def step_impl(context):
    """Set undecodable nslookup output."""
    context.lookup_output = b"\xff\xfe\xfd"


@given("the configuration file contains")
def step_impl(context):
    """Write the YAML configuration file."""
    yaml.safe_load(context.text)
    context.config_path.write_text(context.text)


@when('I run cfg-adguard-dns with "{arguments}"')
def step_impl(context, arguments):
    """Run the CLI with the given arguments."""
    run_cli(context, arguments.split())


@when("I run cfg-adguard-dns without arguments")
def step_impl(context):
    """Run the CLI with no arguments."""
    run_cli(context, [])


def run_cli(context, arguments):
    context.exit_code = 0
    with patch(
        "cfg_adguard_dns.utils.process.subprocess.run", side_effect=_fake_run(context)
    ), patch("sys.stdout", new_callable=io.StringIO) as out, patch(
        "sys.stderr", new_callable=io.StringIO
    ) as err:
        try:
            main(["cfg-adguard-dns", *arguments])
        except SystemExit as e:
            context.exit_code = e.code

    context.stdout = out.getvalue()
    context.stderr = err.getvalue()


@then("the command should succeed")
def step_impl(context):
    assert context.exit_code in (0, None), f"exit code {context.exit_code}"


@then("the command should fail with exit code {code:d}")
def step_impl(context, code):
    assert context.exit_code == code, f"exit code {context.exit_code}"


@then('stdout should contain "{text}"')
def step_impl(context, text):
    assert text in context.stdout, f"stdout was: {context.stdout!r}"


@then("stdout should be empty")
def step_impl(context):
    assert context.stdout == "", f"stdout was: {context.stdout!r}"


@then('stderr should contain "{text}"')
def step_impl(context, text):
    assert text in context.stderr, f"stderr was: {context.stderr!r}"


@then("the head file should be empty")
def step_impl(context):
    assert context.head_path.read_text() == ""


@then("the head file should not exist")
def step_impl(context):
    assert not context.head_path.exists()


@then("the head file should contain the AdGuard DNS template")
def step_impl(context):
    assert EXTENDED_TEMPLATE in context.head_path.read_text()


@then("the head file should contain only the default template")
def step_impl(context):
    content = context.head_path.read_text()
    assert DEFAULT_TEMPLATE in content
    assert ADGUARD_DNS_SERVER_CONFIG not in content


@then('"{command}" should have been run {times:d} time(s)')
def step_impl(context, command, times):
    runs = [c for c in context.commands if " ".join(c) == command]
    assert len(runs) == times, f"commands run: {context.commands}"


@then("no command should have been run")
def step_impl(context):
    assert context.commands == [], f"commands run: {context.commands}"
