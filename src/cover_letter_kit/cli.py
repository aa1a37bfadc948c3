"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
from rich.console import Console
from rich.table import Table

from cover_letter_kit.clients.llm_client import LLMClient
from cover_letter_kit.config import AppConfig, load_config
from cover_letter_kit.export.docx_renderer import render_docx
from cover_letter_kit.export.filenames import (
    build_docx_filename,
    build_pdf_filename,
    build_resume_filename,
)
from cover_letter_kit.export.pdf_renderer import render_cover_letter_pdf, render_resume_pdf
from cover_letter_kit.models.artifact import ExportArtifact
from cover_letter_kit.models.extraction import ExtractedText
from cover_letter_kit.models.tone import Tone
from cover_letter_kit.parsers.jd_parser import fetch_job_posting, parse_jd
from cover_letter_kit.parsers.metadata import extract_metadata
from cover_letter_kit.parsers.resume_parser import parse_resume
from cover_letter_kit.pipeline.generator import DocumentGenerator, DocumentKind
from cover_letter_kit.utils.url_validator import normalize_url

app = typer.Typer(
    name="cover-letter-kit",
    help="Tailored cover letters and resumes from a job posting and your resume",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _unwrap(result: ExtractedText) -> str:
    if not result.success:
        console.print(f"[red]{result.error}[/red]")
        raise typer.Exit(1)
    return result.text


def _read_text(path: Path) -> str:
    if not path.exists():
        console.print(f"[red]File not found: {path}[/red]")
        raise typer.Exit(1)
    return path.read_text(encoding="utf-8")


def _fetch(url: str, config: AppConfig) -> str:
    try:
        url = normalize_url(url)
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1) from exc
    with console.status("Fetching job posting..."):
        result = fetch_job_posting(
            url,
            timeout=config.scrape.timeout,
            user_agent=config.scrape.user_agent,
            max_chars=config.scrape.max_chars,
        )
    return _unwrap(result)


def _save(artifact: ExportArtifact, output: Path | None, config: AppConfig) -> Path:
    target = output or config.export.resolved_output_dir
    if output is None:
        target.mkdir(parents=True, exist_ok=True)
    path = artifact.save(target)
    console.print(f"[green]Saved: {path}[/green]")
    return path


@app.command("parse-resume")
def parse_resume_cmd(
    file: Path = typer.Argument(help="Resume file (PDF or DOCX)"),
) -> None:
    """Extract plain text from a resume file."""
    if not file.exists():
        console.print(f"[red]File not found: {file}[/red]")
        raise typer.Exit(1)
    console.print(_unwrap(parse_resume(file)), markup=False, highlight=False)


@app.command()
def scrape(
    url: str = typer.Argument(help="Job posting URL"),
) -> None:
    """Fetch a job posting and print its text."""
    console.print(_fetch(url, load_config()), markup=False, highlight=False)


@app.command()
def metadata(
    letter: Path = typer.Argument(help="Generated cover letter text file"),
    job: Path = typer.Option(None, "--job", help="Job description text file"),
) -> None:
    """Show candidate, company and job title found in a letter and posting."""
    job_text = parse_jd(_read_text(job)) if job else ""
    meta = extract_metadata(_read_text(letter), job_text)

    table = Table(title="Document metadata")
    table.add_column("Field")
    table.add_column("Value")
    table.add_row("Candidate", meta.candidate_name or "-")
    table.add_row("Company", meta.company_name or "-")
    table.add_row("Job title", meta.job_title or "-")
    console.print(table)
    console.print(f"[dim]{build_pdf_filename(meta)}[/dim]")


def _export(
    text: str,
    kind: str,
    job_text: str,
    resume_text: str,
    output: Path | None,
    config: AppConfig,
) -> Path:
    if kind == "cover-letter":
        meta = extract_metadata(text, job_text)
        artifact = render_cover_letter_pdf(text, meta, filename=build_pdf_filename(meta))
    elif kind == "resume":
        name = build_resume_filename(resume_text or text, job_text) + ".pdf"
        artifact = render_resume_pdf(text, filename=name)
    elif kind == "docx":
        artifact = render_docx(text, filename=build_docx_filename(resume_text or text, job_text))
    else:
        console.print(f"[red]Unknown export kind: {kind}[/red]")
        raise typer.Exit(1)
    return _save(artifact, output, config)


@app.command()
def export(
    file: Path = typer.Argument(help="Text file with the cover letter or resume"),
    kind: str = typer.Option("cover-letter", "--kind", "-k", help="cover-letter | resume | docx"),
    job: Path = typer.Option(None, "--job", help="Job description text file (for filenames)"),
    output: Path = typer.Option(None, "--output", "-o", help="Output file or directory"),
) -> None:
    """Export edited text as a PDF or DOCX file."""
    config = load_config()
    job_text = parse_jd(_read_text(job)) if job else ""
    _export(_read_text(file), kind, job_text, "", output, config)


@app.command()
def generate(
    resume: Path = typer.Option(..., "--resume", help="Resume file (PDF or DOCX)"),
    job: Path = typer.Option(None, "--job", help="Job description text file"),
    url: str = typer.Option(None, "--url", help="Job posting URL"),
    kind: DocumentKind = typer.Option(DocumentKind.COVER_LETTER, "--kind", "-k"),
    tone: str = typer.Option(
        None, "--tone", help=f"Writing tone: {', '.join(t.value for t in Tone)}"
    ),
    pdf: bool = typer.Option(False, "--pdf", help="Export the result as PDF"),
    docx: bool = typer.Option(False, "--docx", help="Export the result as DOCX"),
    output: Path = typer.Option(None, "--output", "-o", help="Output directory"),
    stream: bool = typer.Option(
        True, "--stream/--no-stream", help="Print text as it arrives, or wait for the full reply"
    ),
) -> None:
    """Generate a cover letter, curated resume or recommendations."""
    config = load_config()
    if not resume.exists():
        console.print(f"[red]File not found: {resume}[/red]")
        raise typer.Exit(1)
    resume_text = _unwrap(parse_resume(resume))

    if url:
        job_text = _fetch(url, config)
    elif job:
        job_text = parse_jd(_read_text(job))
    else:
        console.print("[red]Provide --job or --url[/red]")
        raise typer.Exit(1)

    llm = LLMClient(timeout=config.llm.timeout)
    generator = DocumentGenerator(
        llm,
        model=config.llm.model,
        max_tokens=config.llm.max_tokens,
        max_input_chars=config.prompt.max_input_chars,
    )

    tone = tone or config.prompt.default_tone

    async def _run_streamed() -> str:
        chunks: list[str] = []
        async for chunk in generator.stream(kind, resume_text, job_text, tone):
            chunks.append(chunk)
            console.print(chunk, end="", markup=False, highlight=False)
        console.print()
        return "".join(chunks)

    if stream:
        text = asyncio.run(_run_streamed())
    else:
        with console.status("Generating..."):
            text = asyncio.run(generator.complete(kind, resume_text, job_text, tone))
        console.print(text, markup=False, highlight=False)

    if not text.strip():
        console.print("[yellow]Nothing was generated.[/yellow]")
        raise typer.Exit(1)

    tokens = llm.get_token_summary()
    console.print(f"[dim]Tokens: {tokens['input']} in / {tokens['output']} out[/dim]")

    if pdf:
        pdf_kind = "cover-letter" if kind == DocumentKind.COVER_LETTER else "resume"
        _export(text, pdf_kind, job_text, resume_text, output, config)
    if docx:
        _export(text, "docx", job_text, resume_text, output, config)


if __name__ == "__main__":
    app()
