"""Markdown rendering for the card and grid widgets"""
from __future__ import annotations

from typing import List

from src.ui.dashboard import AspectCard, MatrixCell, MetricCard, TopAspectCard

TONE_MARKERS = {"correct": "🟩", "error": "🟥"}

def metric_cards_markdown(title: str, cards: List[MetricCard]) -> str:
    """Titled list of metric cards"""
    lines = [f"## {title}"]
    if not cards:
        lines.append("_No data_")
    for card in cards:
        lines.append(f"**{card.title}**: `{card.value}`")
        if card.description:
            lines.append(f"<sub>{card.description}</sub>")
    return "\n\n".join(lines)

def confusion_matrix_markdown(cells: List[MatrixCell]) -> str:
    """2x2 grid in the order produced by confusion_cells"""
    if len(cells) != 4:
        return "## Confusion Matrix\n\n_No data_"
    rendered = [f"{TONE_MARKERS[c.tone]} **{c.label}**<br>{c.value}" for c in cells]
    return "\n".join([
        "## Confusion Matrix",
        "",
        "| | |",
        "|---|---|",
        f"| {rendered[0]} | {rendered[1]} |",
        f"| {rendered[2]} | {rendered[3]} |",
    ])

def top_aspects_markdown(cards: List[TopAspectCard]) -> str:
    """Top aspect cards; empty string when there are none"""
    if not cards:
        return ""
    blocks = ["### Top Aspects"]
    for card in cards:
        blocks.append(
            f"**{card.aspect}**  \nFrequency: {card.frequency}  \nSentiment: {card.sentiment}"
        )
    return "\n\n".join(blocks)

def aspect_details_markdown(cards: List[AspectCard]) -> str:
    """Per-aspect section with keywords and example quotes"""
    if not cards:
        return ""
    blocks = ["### Aspect Details"]
    for card in cards:
        keywords = " ".join(f"`{k}`" for k in card.keywords) or "_none_"
        examples = "\n".join(f"- {e}" for e in card.examples) or "_none_"
        blocks.append(
            f"#### {card.aspect}\n"
            f"Sentiment: {card.sentiment}  \n"
            f"Confidence: {card.confidence}  \n"
            f"Mentions: {card.mentions}\n\n"
            f"**Keywords:** {keywords}\n\n"
            f"**Examples:**\n{examples}"
        )
    return "\n\n".join(blocks)
