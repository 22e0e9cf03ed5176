from typing import Optional
import typer
import httpx

DEFAULT_API_URL = "http://127.0.0.1:8000"
cli = typer.Typer(add_completion=False)

@cli.command()
def main(
    owner: str = typer.Option(..., help="Repository owner"),
    repo: str = typer.Option(..., help="Repository name"),
    question: str = typer.Argument(None, help="Your question. If omitted, enter interactive mode."),
    context: Optional[str] = typer.Option(None, help="Extra context; enables improvement suggestions"),
    token: Optional[str] = typer.Option(None, envvar="GITHUB_TOKEN", help="GitHub token sent as X-GitHub-Token"),
    markdown: bool = typer.Option(False, "--markdown", help="Print the markdown rendering"),
    api_url: str = typer.Option(DEFAULT_API_URL, help="Q&A API base URL"),
):
    opts = dict(context=context, token=token, markdown=markdown, api_url=api_url)
    if question is None:
        typer.echo(f"Asking about {owner}/{repo}. Type 'exit' to quit.\n")
        while True:
            try:
                q = input("> ").strip()
            except (EOFError, KeyboardInterrupt):
                break
            if not q or q.lower() in {"exit", "quit"}:
                break
            _ask(owner, repo, q, **opts)
    else:
        _ask(owner, repo, question, **opts)

def _ask(owner: str, repo: str, q: str, *, context: Optional[str], token: Optional[str], markdown: bool, api_url: str):
    payload = {"owner": owner, "repo": repo, "question": q}
    if context:
        payload["context"] = context
    headers = {"X-GitHub-Token": token} if token else {}
    path = "/answer/markdown" if markdown else "/answer"
    try:
        resp = httpx.post(api_url.rstrip("/") + path, json=payload, headers=headers, timeout=30.0)
        if resp.status_code >= 400:
            typer.secho(f"Error: {resp.status_code} {resp.text}", fg=typer.colors.RED)
            return
        data = resp.json()
        if markdown:
            typer.echo(data["markdown"])
            return
        typer.secho(data["text"], fg=typer.colors.GREEN)
        if data.get("relatedFiles"):
            typer.echo("\nRelated files:")
            for f in data["relatedFiles"]:
                typer.echo(f"  - {f['path']} ({f['url']})")
        if data.get("suggestions"):
            typer.echo("\nSuggestions:")
            for s in data["suggestions"]:
                typer.echo(f"  - {s}")
        typer.echo("")
    except httpx.HTTPError as e:
        typer.secho(f"Client error: {e}", fg=typer.colors.RED)

if __name__ == "__main__":
    cli()
