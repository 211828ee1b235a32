from typing import Optional

from fastmcp import FastMCP

from windview.controller import WeatherController
from windview.display import LABEL_ORDER, LabelBoard

mcp = FastMCP("windview")

board = LabelBoard()
controller = WeatherController(board)


def format_report(labels: Optional[dict], error: Optional[Exception] = None) -> str:
    """Join the displayed labels into a one-line report."""
    if labels:
        return " | ".join(labels[key] for key in LABEL_ORDER)
    if error is not None:
        return f"Weather unavailable: {error}"
    return "Weather unavailable"


async def wind_report() -> str:
    """Current wind report: location, wind speed, wind direction and coordinates."""
    if board.labels() is None:
        await controller.run()
    return format_report(board.labels(), controller.last_error)


mcp.tool(wind_report)


if __name__ == "__main__":
    mcp.run()
