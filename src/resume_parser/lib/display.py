"""Display and formatting utilities for CLI output."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

if TYPE_CHECKING:
    from resume_parser.lib.models.models import ParsedResume


console = Console()
err_console = Console(stderr=True)


def or_dash(value: str) -> str:
    """Render empty strings as a dim dash."""
    return value if value else "[dim]-[/dim]"


def display_resume(resume: ParsedResume) -> None:
    """Print a parsed resume as panels and tables."""
    contact = resume.contact_info
    address = ", ".join(
        part
        for part in (
            contact.address.street,
            contact.address.city,
            contact.address.state,
            contact.address.zip_code,
            contact.address.country,
        )
        if part
    )
    lines = [
        f"[bold]Name:[/bold] {or_dash(resume.full_name)}",
        f"[bold]Email:[/bold] {or_dash(contact.email)}",
        f"[bold]Phone:[/bold] {or_dash(contact.phone)}",
        f"[bold]Address:[/bold] {or_dash(address)}",
        f"[bold]LinkedIn:[/bold] {or_dash(contact.linked_in)}",
        f"[bold]Website:[/bold] {or_dash(contact.website)}",
    ]
    if resume.summary:
        lines.extend(["", resume.summary])

    console.print()
    console.print(Panel("\n".join(lines), title="[bold]Contact[/bold]", border_style="blue"))

    if resume.work_experience:
        table = Table(box=box.ROUNDED, header_style="bold cyan", title="Work Experience")
        table.add_column("Title", style="green")
        table.add_column("Company")
        table.add_column("Location", style="dim")
        table.add_column("Dates", no_wrap=True)
        for job in resume.work_experience:
            end = f"[bold green]{job.end_date}[/bold green]" if job.is_current else job.end_date
            dates = f"{job.start_date} - {end}" if job.start_date or job.end_date else ""
            table.add_row(or_dash(job.title), or_dash(job.company), or_dash(job.location), or_dash(dates))
        console.print(table)

    if resume.education:
        table = Table(box=box.ROUNDED, header_style="bold cyan", title="Education")
        table.add_column("Institution", style="green")
        table.add_column("Degree")
        table.add_column("Field")
        table.add_column("Graduated", no_wrap=True)
        for entry in resume.education:
            table.add_row(
                or_dash(entry.institution),
                or_dash(entry.degree),
                or_dash(entry.field),
                or_dash(entry.graduation_date),
            )
        console.print(table)

    if resume.skills:
        console.print(f"[bold]Skills:[/bold] {', '.join(resume.skills)}")
    if resume.certifications:
        certs = [c if isinstance(c, str) else ", ".join(str(v) for v in c.values()) for c in resume.certifications]
        console.print(f"[bold]Certifications:[/bold] {'; '.join(certs)}")
    console.print()
