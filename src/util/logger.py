import sys

from loguru import logger

PALETTE = {
    "ucs_solver": "green",
    "parser": "blue",
    "cli": "magenta",
}

LEVEL_PER_COMPONENT = {
    "ucs_solver": "INFO",
    "parser": "WARNING",
}


def set_component_level(component: str, level: str) -> None:
    """Change the minimum level shown for one component."""
    logger.level(level)  # raises ValueError on unknown level names
    LEVEL_PER_COMPONENT[component] = level


def component_filter(record):
    comp = record["extra"].get("component", "")
    min_level = logger.level(LEVEL_PER_COMPONENT.get(comp, "DEBUG")).no
    return record["level"].no >= min_level


def formatter(record):
    comp = record["extra"].get("component", "")
    colour = PALETTE.get(comp, "white")

    # The tag lives in the *template* that the sink receives,
    # so Loguru will translate it to ANSI codes.
    template = (
        "{time:HH:mm:ss} | "
        f"<{colour}>{comp:<12}</> | "
        "<level>{message}</level>"
    )

    # Search progress bound by the solver
    extra = record["extra"]
    if "expansions" in extra:
        template += " | <dim>{extra[expansions]} expanded</dim>"
    if "cost" in extra:
        template += " | <dim>cost {extra[cost]}</dim>"
    return template + "\n"


logger.remove()
logger.add(sys.stderr, format=formatter, filter=component_filter, colorize=True)
