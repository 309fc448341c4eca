"""
netrange command-line interface.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from itertools import islice
from typing import NoReturn

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from netrange import __version__
from netrange.config import get_config
from netrange.exceptions import NetRangeError
from netrange.logging_config import get_logger, setup_logging
from netrange.ranges import (
    NetRangeV4,
    NetRangeV6,
    mixed_sort_key,
    parse_range,
    try_parse_range,
)

logger = get_logger(__name__)


class PrefixLengthType(click.ParamType):
    """Prefix length given as "24" or "/24"."""
    name = "prefix"

    def convert(self, value, param, ctx):
        if isinstance(value, int):
            return value
        text = value[1:] if value.startswith("/") else value
        try:
            return int(text)
        except ValueError:
            self.fail(f"{value!r} is not a prefix length", param, ctx)


PREFIX_LENGTH = PrefixLengthType()


def _fail(console: Console, error: Exception) -> NoReturn:
    console.print(f"[red]Error:[/red] {escape(str(error))}")
    raise SystemExit(1)


def _flags(rng: NetRangeV4 | NetRangeV6) -> list[str]:
    flags = []
    if isinstance(rng, NetRangeV4):
        if rng.is_private_range:
            flags.append("[yellow]Private[/yellow]")
        if rng.is_loopback:
            flags.append("[blue]Loopback[/blue]")
    else:
        if rng.is_loopback:
            flags.append("[blue]Loopback[/blue]")
        if rng.is_link_local:
            flags.append("[cyan]Link-Local[/cyan]")
        if rng.is_unique_local:
            flags.append("[yellow]Unique-Local[/yellow]")
    if rng.is_host:
        flags.append("[magenta]Host[/magenta]")
    return flags


@click.group()
@click.version_option(__version__, prog_name="netrange")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--log-file", type=click.Path(dir_okay=False), default=None,
              help="Also write logs to this file")
@click.pass_context
def main(ctx: click.Context, debug: bool, log_file: str | None):
    """IPv4/IPv6 CIDR range utilities."""
    config = get_config()
    log_file = log_file or config.log_file
    setup_logging(
        level="DEBUG" if debug else config.log_level,
        log_file=log_file,
        enable_file=log_file is not None,
    )
    ctx.obj = config


@main.command()
@click.argument("cidr")
def info(cidr: str):
    """Show everything known about a CIDR range.

    Examples:
        netrange info 192.168.1.0/24
        netrange info 2001:db8::/32
    """
    console = Console()

    try:
        rng = parse_range(cidr)
    except NetRangeError as e:
        _fail(console, e)

    table = Table(title=f"Range Information: {cidr}", show_header=False, box=None)
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Range", str(rng))
    table.add_row("Version", f"IPv{rng.version}")
    table.add_row("Network", str(rng.network_address))
    table.add_row("Prefix Length", f"/{rng.prefix_length}")
    table.add_row("Netmask", str(rng.netmask))
    table.add_row("Hostmask", str(rng.hostmask))
    table.add_row("First Usable", str(rng.first_usable_address))
    table.add_row("Last Usable", str(rng.last_usable_address))
    label = "Broadcast" if rng.version == 4 else "Last Address"
    table.add_row(label, str(rng.last_address))
    table.add_row("Total Addresses", f"{rng.total_addresses:,}")

    flags = _flags(rng)
    table.add_row("Flags", " ".join(flags) if flags else "[dim]None[/dim]")

    console.print(table)


@main.command()
@click.argument("cidr")
@click.argument("address")
def contains(cidr: str, address: str):
    """Check if a CIDR range contains an IP address.

    Examples:
        netrange contains 10.0.0.0/8 10.1.2.3
        netrange contains 2001:db8::/32 2001:db8::1
    """
    console = Console()

    try:
        result = parse_range(cidr).contains(address)
    except NetRangeError as e:
        _fail(console, e)

    if result:
        console.print(f"[green]Yes[/green] - {address} is within {cidr}")
    else:
        console.print(f"[red]No[/red] - {address} is not within {cidr}")


@main.command()
@click.argument("cidr1")
@click.argument("cidr2")
def overlap(cidr1: str, cidr2: str):
    """Check if two CIDR ranges overlap.

    Examples:
        netrange overlap 10.0.0.0/16 10.0.255.0/24
        netrange overlap 192.168.0.0/24 192.168.1.0/24
    """
    console = Console()

    try:
        result = parse_range(cidr1).overlaps_with(parse_range(cidr2))
    except NetRangeError as e:
        _fail(console, e)

    if result:
        console.print(f"[yellow]Yes[/yellow] - {cidr1} and {cidr2} overlap")
    else:
        console.print(f"[green]No[/green] - {cidr1} and {cidr2} do not overlap")


@main.command()
@click.argument("cidr1")
@click.argument("cidr2")
def relation(cidr1: str, cidr2: str):
    """Show how two ranges of the same family relate.

    Examples:
        netrange relation 10.0.10.0/24 10.0.0.0/16
    """
    console = Console()

    try:
        first = parse_range(cidr1)
        second = parse_range(cidr2)
        overlaps = first.overlaps_with(second)
        subnet = first.is_subnet_of(second)
        supernet = first.is_supernet_of(second)
        order = first.compare_to(second)
    except NetRangeError as e:
        _fail(console, e)

    def yes_no(value: bool) -> str:
        return "[green]Yes[/green]" if value else "[red]No[/red]"

    table = Table(title=f"{first} vs {second}", show_header=False, box=None)
    table.add_column("Relation", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Overlaps", yes_no(overlaps))
    table.add_row(f"{first} is subnet of {second}", yes_no(subnet))
    table.add_row(f"{first} is supernet of {second}", yes_no(supernet))
    table.add_row("Sort order", {-1: "before", 0: "equal", 1: "after"}[order])

    console.print(table)


@main.command()
@click.argument("cidr")
@click.argument("new_prefix", type=PREFIX_LENGTH)
@click.option("--limit", type=click.IntRange(min=0), default=None,
              help="Maximum subnets to list (default from NETRANGE_MAX_DISPLAY)")
@click.pass_obj
def split(config, cidr: str, new_prefix: int, limit: int | None):
    """Split a CIDR range into smaller subnets.

    Examples:
        netrange split 192.168.1.0/24 26
        netrange split 10.0.0.0/8 /16 --limit 10
    """
    console = Console()

    try:
        subnets = parse_range(cidr).get_subnets(new_prefix)
    except NetRangeError as e:
        _fail(console, e)

    limit = limit if limit is not None else config.max_display
    logger.debug("Listing at most %d of %d subnets", limit, subnets.count)

    console.print(f"[cyan]Splitting {cidr} into /{new_prefix} subnets:[/cyan]")
    console.print(f"[dim]Total subnets: {subnets.count:,}[/dim]\n")

    if subnets.count > limit:
        console.print(f"[yellow]Showing first {limit:,} subnets...[/yellow]\n")

    for subnet in islice(subnets, limit):
        console.print(str(subnet))

    if subnets.count > limit:
        console.print(f"\n[dim]... and {subnets.count - limit:,} more[/dim]")


@main.command()
@click.argument("cidr")
@click.argument("new_prefix", type=PREFIX_LENGTH)
def supernet(cidr: str, new_prefix: int):
    """Get the enclosing range with a shorter prefix.

    Examples:
        netrange supernet 192.168.1.0/24 16
        netrange supernet 2001:db8::/64 /32
    """
    console = Console()

    try:
        result = parse_range(cidr).get_supernet(new_prefix)
    except NetRangeError as e:
        _fail(console, e)

    console.print(str(result))


@main.command(name="sort")
@click.argument("cidrs", nargs=-1, required=True)
def sort_ranges(cidrs: tuple[str, ...]):
    """Sort CIDR ranges (IPv4 first, then by network and prefix length).

    Examples:
        netrange sort 192.168.1.128/25 10.0.0.0/8 192.168.1.0/24 10.0.0.0/16
    """
    console = Console()

    try:
        ranges = [parse_range(cidr) for cidr in cidrs]
    except NetRangeError as e:
        _fail(console, e)

    for rng in sorted(ranges, key=mixed_sort_key):
        console.print(str(rng))


@main.command()
@click.argument("source", type=click.File("r"), default="-")
def validate(source):
    """Validate CIDR ranges, one per line ("-" reads stdin).

    Blank lines and lines starting with "#" are skipped. Exits with
    status 1 if any line is invalid.

    Examples:
        netrange validate prefixes.txt
        cat prefixes.txt | netrange validate
    """
    console = Console()

    valid = 0
    invalid: list[tuple[int, str]] = []

    for lineno, line in enumerate(source, start=1):
        text = line.strip()
        if not text or text.startswith("#"):
            continue
        ok, _ = try_parse_range(text)
        if ok:
            valid += 1
        else:
            invalid.append((lineno, text))

    if invalid:
        table = Table(title="Invalid Ranges", box=None)
        table.add_column("Line", style="cyan", justify="right")
        table.add_column("Input", style="red")
        for lineno, text in invalid:
            table.add_row(str(lineno), escape(text))
        console.print(table)

    console.print(f"[green]{valid} valid[/green], [red]{len(invalid)} invalid[/red]")

    if invalid:
        raise SystemExit(1)


@main.command()
def demo():
    """Walk through the main range operations with sample networks."""
    console = Console()

    network = NetRangeV4("192.168.1.0/24")
    console.print("[cyan bold]Range basics[/cyan bold]")
    console.print(f"Network: {network}")
    console.print(f"Broadcast: {network.broadcast_address}")
    console.print(f"First usable: {network.first_usable_address}")
    console.print(f"Total addresses: {network.total_addresses}")
    console.print()

    console.print("[cyan bold]contains()[/cyan bold]")
    for address in ("192.168.1.150", "10.0.0.5", network.network_address, network.last_address):
        console.print(f"{address} in {network}? {network.contains(address)}")
    console.print()

    large = NetRangeV4("10.0.0.0/16")
    inner = NetRangeV4("10.0.10.0/24")
    edge = NetRangeV4("10.0.255.0/24")
    separate = NetRangeV4("172.16.0.0/16")

    console.print("[cyan bold]overlaps_with()[/cyan bold]")
    for other in (inner, edge, separate):
        console.print(f"{large} overlaps {other}? {large.overlaps_with(other)}")
    console.print()

    console.print("[cyan bold]is_subnet_of() / is_supernet_of()[/cyan bold]")
    console.print(f"{inner} subnet of {large}? {inner.is_subnet_of(large)}")
    console.print(f"{large} subnet of {inner}? {large.is_subnet_of(inner)}")
    console.print(f"{large} supernet of {inner}? {large.is_supernet_of(inner)}")
    console.print()

    console.print("[cyan bold]Sorting[/cyan bold]")
    ranges = [
        NetRangeV4("192.168.1.128/25"),
        NetRangeV4("10.0.0.0/8"),
        NetRangeV4("192.168.1.0/24"),
        NetRangeV4("10.0.0.0/16"),
    ]
    console.print("Unsorted: " + ", ".join(str(r) for r in ranges))
    console.print("Sorted:   " + ", ".join(str(r) for r in sorted(ranges)))
    console.print()

    to_split = NetRangeV4("172.16.10.0/24")
    console.print(f"[cyan bold]get_subnets(): {to_split} into /26[/cyan bold]")
    for subnet in to_split.get_subnets(26):
        console.print(
            f"- {subnet} (first usable {subnet.first_usable_address}, "
            f"last usable {subnet.last_usable_address})"
        )
