"""
cli.py

Entry point for CLI.
"""

import sys

import click
from loguru import logger

from yatzyscore import __version__
from yatzyscore.rulesets import AVAILABLE_RULESETS, ScoringCategory, ScoringSection

CATEGORY_CHOICE = click.Choice([c.value for c in ScoringCategory])


def ruleset_option(func):
    return click.option(
        "--ruleset", type=click.Choice(list(AVAILABLE_RULESETS.keys())), default="yatzy"
    )(func)


def parse_score(ctx, param, values):
    scores = {}
    for value in values:
        category, sep, score = value.partition("=")
        if not sep:
            raise click.BadParameter(f"expected CATEGORY=SCORE, got {value!r}")

        try:
            category = ScoringCategory(category)
        except ValueError:
            raise click.BadParameter(f"unknown category {category!r}")

        try:
            score = int(score)
        except ValueError:
            raise click.BadParameter(f"score for {category.value} must be an integer")

        if score < 0:
            raise click.BadParameter(f"score for {category.value} must not be negative")

        if category in scores:
            raise click.BadParameter(f"category {category.value} given more than once")

        scores[category] = score

    return scores


@click.group("yatzyscore", invoke_without_command=True)
@click.version_option(version=__version__)
@click.pass_context
@click.option(
    "-v",
    "--loglevel",
    type=click.Choice(["debug", "info", "warning", "error"]),
    default="warning",
)
def cli(ctx, loglevel):
    """Scores Yatzy hands and scorecards."""

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        return

    logger.remove()
    logger.add(sys.stderr, level=loglevel.upper())
    logger.enable("yatzyscore")


@cli.command("score")
@click.argument("DICE", nargs=5, type=click.IntRange(1, 6))
@click.option("-c", "--category", type=CATEGORY_CHOICE, default=None)
@ruleset_option
def score(dice, category, ruleset):
    """Score a roll of five dice."""
    ruleset = AVAILABLE_RULESETS[ruleset]

    if category is not None:
        click.echo(ruleset.score(category, dice))
        return

    logger.info("Scoring {} in all categories", list(dice))
    for cat in ruleset.categories:
        click.echo(f"{cat.name:<16} {ruleset.score(cat.category, dice):>3}")


@cli.command("totals")
@click.argument("SCORES", nargs=-1, callback=parse_score)
@ruleset_option
def totals(scores, ruleset):
    """Compute totals from recorded scores given as CATEGORY=SCORE."""
    from yatzyscore.scorecard import Scorecard

    scorecard = Scorecard(AVAILABLE_RULESETS[ruleset], scores)
    open_categories = scorecard.open_categories()
    if open_categories:
        logger.info("Open categories: {}", ", ".join(c.value for c in open_categories))

    summary = [
        ("Upper section", scorecard.upper_section_total()),
        ("Bonus", scorecard.upper_section_bonus()),
        ("Lower section", scorecard.lower_section_total()),
        ("Total", scorecard.total_score()),
    ]
    click.echo("\n".join(f"{label:<16} {value:>3}" for label, value in summary))


@cli.command("categories")
@ruleset_option
def categories(ruleset):
    """List the scoring categories."""
    ruleset = AVAILABLE_RULESETS[ruleset]

    for section in ScoringSection:
        header = f"{section.value} section"
        click.echo(header)
        click.echo("-" * len(header))
        for category in ruleset.section_categories(section):
            cat = ruleset.get_category(category)
            click.echo(
                f" {cat.category.value:<16} {cat.name:<16} {cat.description}"
            )
        click.echo("")


@cli.command("stats")
@ruleset_option
def stats(ruleset):
    """Show expected score per category for a single roll."""
    from yatzyscore.stats import expected_scores

    ruleset = AVAILABLE_RULESETS[ruleset]
    result = expected_scores(ruleset, progress=True)

    for cat in ruleset.categories:
        cat_stats = result[cat.category]
        click.echo(
            f"{cat.name:<16} mean {cat_stats['mean']:6.2f} | "
            f"hit rate {cat_stats['hit_rate']:6.1%} | max {cat_stats['max']:>3}"
        )


if __name__ == "__main__":
    cli()
