"""Console rendering of scan results."""

from rchan.scanner import Failed, UpToDate, Updated


def format_result(result):
    """Return the status line for one scan result."""
    if isinstance(result, Updated):
        return f"UPDATED {result.name} {result.local_ver} -> {result.remote_ver}"
    if isinstance(result, UpToDate):
        return f"OK {result.name} ({result.local_ver})"
    if isinstance(result, Failed):
        return f"ERROR {result.name} - {result.message}"
    raise TypeError(f"Unknown scan result: {result!r}")


def summarize(results):
    """Count results per outcome."""
    counts = {"checked": len(results), "updated": 0, "up_to_date": 0, "errors": 0}
    for result in results:
        if isinstance(result, Updated):
            counts["updated"] += 1
        elif isinstance(result, UpToDate):
            counts["up_to_date"] += 1
        elif isinstance(result, Failed):
            counts["errors"] += 1
        else:
            raise TypeError(f"Unknown scan result: {result!r}")
    return counts


def print_report(results):
    """Print one line per result followed by the summary."""
    for result in results:
        print(format_result(result))

    counts = summarize(results)
    print()
    print(
        f"Summary: {counts['checked']} checked, {counts['updated']} updated, "
        f"{counts['up_to_date']} up-to-date, {counts['errors']} errors"
    )
    return counts
