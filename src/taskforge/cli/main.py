"""Main CLI entry point for taskforge."""

import asyncio
import json
import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from taskforge.agents.protocol import WorkerCategory
from taskforge.agents.registry import WorkerRegistry
from taskforge.config.manager import ConfigManager
from taskforge.execution.factory import ExecutorUnavailableError, create_executor
from taskforge.orchestration.dispatcher import TaskDispatcher
from taskforge.orchestration.models import InvalidTaskError, Priority, TaskCategory, TaskRequest
from taskforge.output.formatter import get_formatter

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    """Route taskforge logs through rich on stderr."""
    handler = RichHandler(console=Console(stderr=True), show_path=False, markup=False)
    package_logger = logging.getLogger("taskforge")
    package_logger.handlers[:] = [handler]
    package_logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    package_logger.propagate = False


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
@click.option("--no-color", is_flag=True, help="Disable colors")
@click.version_option(package_name="taskforge")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, no_color: bool) -> None:
    """Taskforge - dispatch tasks to specialist AI workers.

    \b
    Examples:
        taskforge dispatch code-generation "build a login form"
        taskforge dispatch analysis "audit the API" --count 3
        taskforge workers list --idle
        taskforge health
    """
    config = ConfigManager.get_config()
    verbose = verbose or config.global_.verbose

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["no_color"] = no_color

    _configure_logging("DEBUG" if verbose else config.global_.log_level)
    get_formatter(color=config.global_.color and not no_color, verbose=verbose)


@cli.command()
@click.argument("task_type", metavar="TYPE")
@click.argument("requirements", nargs=-1, required=True)
@click.option(
    "-p",
    "--priority",
    type=click.Choice([p.value for p in Priority]),
    default=Priority.MEDIUM.value,
    show_default=True,
    help="Task priority",
)
@click.option("--project-id", default="cli", show_default=True, help="Project identifier")
@click.option("--context", "context_json", help="Opaque JSON context passed to the worker")
@click.option(
    "-e",
    "--executor",
    "executor_kind",
    type=click.Choice(["simulated", "llm"]),
    help="Execution capability (default from config)",
)
@click.option("--time-scale", type=float, help="Scale simulated processing times")
@click.option("-n", "--count", default=1, show_default=True, type=click.IntRange(min=1), help="Dispatch the task N times")
@click.option("--json", "output_json", is_flag=True, help="JSON output")
def dispatch(
    task_type: str,
    requirements: tuple[str, ...],
    priority: str,
    project_id: str,
    context_json: str | None,
    executor_kind: str | None,
    time_scale: float | None,
    count: int,
    output_json: bool,
) -> None:
    """Dispatch a task to the best available worker.

    TYPE is one of: code-generation, analysis, testing, deployment, optimization.
    """
    formatter = get_formatter()

    try:
        request = TaskRequest.from_dict(
            {
                "type": task_type,
                "projectId": project_id,
                "requirements": " ".join(requirements),
                "priority": priority,
                "context": json.loads(context_json) if context_json else None,
            }
        )
    except (InvalidTaskError, json.JSONDecodeError) as e:
        formatter.print_error(f"Invalid task: {e}")
        raise SystemExit(2)

    if not isinstance(request.category, TaskCategory):
        formatter.print_warning(f"Unknown task type '{task_type}'")

    config = ConfigManager.get_config()
    if time_scale is not None:
        config = config.model_copy(
            update={"simulation": config.simulation.model_copy(update={"time_scale": time_scale})}
        )

    try:
        executor = create_executor(config, executor_kind)
    except ExecutorUnavailableError as e:
        formatter.print_error(str(e))
        raise SystemExit(1)

    registry = WorkerRegistry()
    dispatcher = TaskDispatcher(
        registry,
        executor,
        execution_timeout=config.dispatch.execution_timeout,
    )

    async def run() -> list:
        return [await dispatcher.dispatch(request) for _ in range(count)]

    responses = asyncio.run(run())

    if output_json:
        payload = [r.to_dict() for r in responses]
        formatter.print_json(payload[0] if count == 1 else payload)
    else:
        for response in responses:
            formatter.print_response(response)
        formatter.print_worker_list(registry.list_all())

    if not all(r.success for r in responses):
        raise SystemExit(1)


@cli.group()
def workers() -> None:
    """Inspect the worker registry."""
    pass


@workers.command("list")
@click.option(
    "-c",
    "--category",
    type=click.Choice([c.value for c in WorkerCategory]),
    help="Only this worker category",
)
@click.option("--idle", "idle_only", is_flag=True, help="Only idle workers")
@click.option("--json", "output_json", is_flag=True, help="JSON output")
def workers_list(category: str | None, idle_only: bool, output_json: bool) -> None:
    """List registered workers."""
    registry = WorkerRegistry()
    formatter = get_formatter()

    if category:
        listed = registry.list_by_category(WorkerCategory(category))
    elif idle_only:
        listed = registry.list_idle()
    else:
        listed = registry.list_all()
    if category and idle_only:
        listed = [w for w in listed if w.is_idle]

    if output_json:
        formatter.print_json([w.to_dict() for w in listed])
        return

    if not listed:
        formatter.print_warning("No workers match")
        return

    formatter.print_worker_list(listed)


@workers.command("show")
@click.argument("worker_id")
def workers_show(worker_id: str) -> None:
    """Show one worker in detail."""
    registry = WorkerRegistry()
    formatter = get_formatter()

    if worker_id not in registry:
        formatter.print_error(f"Unknown worker: {worker_id}")
        raise SystemExit(1)

    formatter.print_json(registry.get(worker_id).to_dict())


@workers.command("stats")
@click.option("--json", "output_json", is_flag=True, help="JSON output")
def workers_stats(output_json: bool) -> None:
    """Show aggregate worker statistics."""
    stats = WorkerRegistry().stats()
    formatter = get_formatter()

    if output_json:
        formatter.print_json(stats.to_dict())
    else:
        formatter.print_stats(stats)


@cli.command()
def health() -> None:
    """Report registry and executor health."""
    config = ConfigManager.get_config()
    formatter = get_formatter()

    try:
        executor = create_executor(config)
        executor_ok = asyncio.run(executor.health_check())
    except ExecutorUnavailableError as e:
        logger.warning("Executor unavailable: %s", e)
        executor_ok = False

    stats = WorkerRegistry().stats()
    formatter.print_json(
        {
            "status": "healthy" if executor_ok else "degraded",
            "executor": {"kind": config.dispatch.executor, "available": executor_ok},
            "workers": stats.to_dict(),
        }
    )


@cli.group()
def config() -> None:
    """Manage configuration."""
    pass


@config.command("show")
def config_show() -> None:
    """Show current configuration."""
    config = ConfigManager.get_config()
    get_formatter().print_json(config.model_dump(by_alias=True))


@config.command("set")
@click.argument("key_path")
@click.argument("value")
def config_set(key_path: str, value: str) -> None:
    """Set a configuration value (VALUE is parsed as JSON when possible)."""
    try:
        parsed = json.loads(value)
    except json.JSONDecodeError:
        parsed = value
    ConfigManager.set_value(key_path, parsed)
    get_formatter().print_success(f"{key_path} = {parsed!r}")


if __name__ == "__main__":
    cli()
