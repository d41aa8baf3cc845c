from typing import Any, Dict, Iterable, List, Optional

DOWNLOAD_NOTE = "*Note: Download URL is temporary and should be used immediately.*"


def unwrap(payload: Any) -> Dict[str, Any]:
    """Return the `data` object of an upstream reply, or the reply itself."""
    if isinstance(payload, dict):
        data = payload.get("data")
        if isinstance(data, dict):
            return data
        return payload
    return {}


def task_status(task: Dict[str, Any]) -> Optional[str]:
    return task.get("status") or task.get("task_status")


def bullet_list(fields: Iterable[tuple]) -> str:
    return "\n".join(f"- **{label}**: {value}" for label, value in fields)


def numbered(urls: List[str]) -> str:
    return "\n".join(f"{i}. {url}" for i, url in enumerate(urls, start=1))


def download_ready(title: str, data: Dict[str, Any], label: str, value: Any) -> str:
    fields = bullet_list([
        ("Filename", data.get("filename")),
        (label, value),
        ("Download URL", data.get("url")),
    ])
    return f"**{title}**\n\n{fields}\n\n{DOWNLOAD_NOTE}"


def task_started(title: str, task: Dict[str, Any], details: Iterable[tuple], note: str) -> str:
    fields = bullet_list([
        ("Task ID", task.get("task_id")),
        ("Status", task_status(task)),
        *details,
    ])
    return f"**{title}**\n\n{fields}\n\n*{note}*"


def task_report(
    title: str,
    task: Dict[str, Any],
    *,
    results_heading: str,
    pending: str,
    details: Iterable[tuple] = (),
) -> str:
    """
    Render a polled task.

    Three outcomes: results available, COMPLETED with nothing generated,
    or still running. The last two must never read the same.
    """
    status = task_status(task)
    text = f"**{title}**\n\n" + bullet_list([
        ("Task ID", task.get("task_id")),
        ("Status", status),
        *details,
    ])

    generated = task.get("generated") or []
    if generated:
        text += f"\n\n**{results_heading}:**\n{numbered(generated)}"
    elif status == "COMPLETED":
        text += "\n\n*Task completed but no images were generated.*"
    else:
        text += f"\n\n*{pending}*"
    return text


def task_list(title: str, payload: Any) -> str:
    tasks = []
    if isinstance(payload, dict) and isinstance(payload.get("data"), list):
        tasks = payload["data"]

    lines = "\n".join(
        f"{i}. **{task.get('task_id')}** - Status: {task_status(task)}"
        for i, task in enumerate(tasks, start=1)
    )
    return f"**{title}**\n\n{lines or '*No tasks found.*'}"
