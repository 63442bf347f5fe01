from __future__ import annotations

from hr_datatable.ui.rendering import RenderedTable

SORT_MARKERS = {"asc": " ^", "desc": " v"}


def _page_bar(rendered: RenderedTable) -> str:
    labels = []
    for label in rendered.page_labels:
        text = str(label)
        labels.append(f"[{text}]" if label == rendered.current_page else text)
    return " ".join(labels)


def format_table(rendered: RenderedTable, title: str | None = None) -> str:
    lines: list[str] = []
    if title:
        lines.append(title)

    toolbar = rendered.toolbar
    if toolbar.search:
        lines.append(f"search: {toolbar.search}")
    active = [f"{control.label}={control.value}" for control in toolbar.filters if control.value != "all"]
    if active:
        lines.append("filters: " + ", ".join(active))
    if toolbar.bulk_actions:
        lines.append("actions: " + " | ".join(toolbar.bulk_actions))
    if rendered.error:
        lines.append(f"error: {rendered.error}")

    headers = [header.label + SORT_MARKERS.get(header.sort_direction or "", "") for header in rendered.headers]
    if rendered.empty_message is not None:
        lines.append(" | ".join(headers))
        lines.extend(f"({message})" for message in rendered.empty_message)
        return "\n".join(lines)

    headers = ["", *headers]
    body = [["*" if row.selected else ("+" if row.highlighted else ""), *row.cells] for row in rendered.rows]
    widths = [max(len(line[idx]) for line in [headers, *body]) for idx in range(len(headers))]

    lines.append(" | ".join(header.ljust(widths[idx]) for idx, header in enumerate(headers)))
    lines.append("-+-".join("-" * width for width in widths))
    for cells in body:
        lines.append(" | ".join(cell.ljust(widths[idx]) for idx, cell in enumerate(cells)))

    lines.append(f"{rendered.range_label}   pages: {_page_bar(rendered)}   rows per page: {rendered.page_size}")
    return "\n".join(lines)


def print_table(rendered: RenderedTable, title: str | None = None) -> None:
    print(format_table(rendered, title))
