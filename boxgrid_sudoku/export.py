"""
Exporters for generated games: SVG, PNG (Pillow) and a PDF booklet
(reportlab) with puzzles and solutions on alternating pages.

File naming convention:
- sudoku6x6-medium-XXXXXXXX-puzzle.svg   (the puzzle with blanks)
- sudoku6x6-medium-XXXXXXXX-solution.svg (the solution)
"""

import logging
import os
from typing import Iterable, Optional, Tuple

from PIL import Image, ImageDraw, ImageFont
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import cm
from reportlab.pdfgen import canvas

from .errors import ExportError
from .game import NewGame
from .grid import Grid, box_dimensions

logger = logging.getLogger(__name__)

PAGE_TITLE = "Sudoku"
SOLUTION_TITLE = "Solution"

# KDP trim size 13.97 cm x 21.59 cm (5.5" x 8.5") in points (1in = 72pt)
KDP_PAGE_SIZE = (396.0, 612.0)
PAGE_SIZES = {"a4": A4, "kdp": KDP_PAGE_SIZE}

EXPORT_FORMATS = ("svg", "png")

CELL_SIZE = 40

# ------------------------------
# SVG
# ------------------------------


def to_svg(
    board: Grid,
    size: int,
    puzzle_id: Optional[str] = None,
    difficulty: Optional[str] = None,
) -> str:
    box = box_dimensions(size)
    cell_size = CELL_SIZE
    line_color = "black"
    width = size * cell_size
    height = size * cell_size

    # white background with room for the footer
    svg = f'<svg xmlns="http://www.w3.org/2000/svg" version="1.1" width="{width}" height="{height + 20}">'
    svg += f'<rect x="0" y="0" width="{width}" height="{height + 20}" fill="white" />'

    # vertical lines, thick on box borders
    for i in range(size + 1):
        line_width = 2 if i % box.cols == 0 else 0.5
        svg += f'<line x1="{i * cell_size}" y1="0" x2="{i * cell_size}" y2="{height}" style="stroke:{line_color}; stroke-width:{line_width}" />'

    # horizontal lines
    for j in range(size + 1):
        line_width = 2 if j % box.rows == 0 else 0.5
        svg += f'<line x1="0" y1="{j * cell_size}" x2="{width}" y2="{j * cell_size}" style="stroke:{line_color}; stroke-width:{line_width}" />'

    for row in range(size):
        for column in range(size):
            if board[row][column] != 0:
                svg += f'<text x="{(column + 0.5) * cell_size}" y="{(row + 0.5) * cell_size}" style="font-size:20; text-anchor:middle; dominant-baseline:middle">{board[row][column]}</text>'

    if puzzle_id:
        label = f"ID: {puzzle_id}"
        if difficulty:
            label += f" - {difficulty}"
        svg += f'<text x="5" y="{height + 15}" style="font-size:10; fill:gray">{label}</text>'

    svg += "</svg>"
    return svg


# ------------------------------
# PNG
# ------------------------------


def to_image(board: Grid, size: int, cell_size: int = CELL_SIZE) -> Image.Image:
    box = box_dimensions(size)
    side = size * cell_size
    img = Image.new("RGB", (side + 1, side + 1), color="white")
    draw = ImageDraw.Draw(img)
    font = ImageFont.load_default()

    for i in range(size + 1):
        offset = i * cell_size
        draw.line(
            [(offset, 0), (offset, side)], fill="black", width=3 if i % box.cols == 0 else 1
        )
        draw.line(
            [(0, offset), (side, offset)], fill="black", width=3 if i % box.rows == 0 else 1
        )

    for r in range(size):
        for c in range(size):
            if board[r][c] != 0:
                text = str(board[r][c])
                left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
                tx = (c + 0.5) * cell_size - (right - left) / 2
                ty = (r + 0.5) * cell_size - (bottom - top) / 2
                draw.text((tx, ty), text, fill="black", font=font)
    return img


# ------------------------------
# Files
# ------------------------------


def make_filename(out_dir: str, game: NewGame, kind: str, ext: str) -> str:
    # kind: 'puzzle' or 'solution'
    name = f"sudoku{game.size}x{game.size}-{game.difficulty}-{game.puzzle_id}-{kind}.{ext}"
    return os.path.join(out_dir, name)


def ensure_output_dir(path: str) -> None:
    os.makedirs(path, exist_ok=True)


def write_pair(game: NewGame, out_dir: str, fmt: str = "svg") -> Tuple[str, str]:
    """Write puzzle and solution files for one game; returns both paths."""
    if fmt not in EXPORT_FORMATS:
        raise ExportError(f"Unknown export format: {fmt}")

    paths = []
    try:
        ensure_output_dir(out_dir)
        for kind, board in (("puzzle", game.puzzle), ("solution", game.solution)):
            path = make_filename(out_dir, game, kind, fmt)
            if fmt == "svg":
                with open(path, "w", encoding="utf-8") as f:
                    f.write(to_svg(board, game.size, game.puzzle_id, game.difficulty))
            else:
                to_image(board, game.size).save(path, "PNG")
            paths.append(path)
    except OSError as e:
        raise ExportError(f"Could not write {game.puzzle_id} to {out_dir}: {e}") from e

    logger.debug("Wrote %s", ", ".join(paths))
    return paths[0], paths[1]


# ------------------------------
# PDF
# ------------------------------


def draw_grid(
    pdf_canvas: canvas.Canvas, board: Grid, size: int, x: float, y: float, side: float
) -> None:
    """Draw a board with its lower-left corner at (x, y)."""
    box = box_dimensions(size)
    cell = side / size

    for i in range(size + 1):
        pdf_canvas.setLineWidth(2 if i % box.cols == 0 else 0.5)
        pdf_canvas.line(x + i * cell, y, x + i * cell, y + side)
    for j in range(size + 1):
        pdf_canvas.setLineWidth(2 if j % box.rows == 0 else 0.5)
        pdf_canvas.line(x, y + side - j * cell, x + side, y + side - j * cell)

    font_size = cell * 0.55
    pdf_canvas.setFont("Helvetica", font_size)
    for r in range(size):
        for c in range(size):
            if board[r][c] != 0:
                cx = x + (c + 0.5) * cell
                cy = y + side - (r + 0.5) * cell - font_size / 3
                pdf_canvas.drawCentredString(cx, cy, str(board[r][c]))


def create_pdf(games: Iterable[NewGame], output_file: str, pagesize=A4) -> int:
    """Write puzzles and solutions on alternating pages; returns the page count."""
    games = list(games)
    if not games:
        raise ExportError("No games to write")

    width, height = pagesize
    margin = 1 * cm
    side = min(width - 2 * margin, height - 3 * cm)
    x = (width - side) / 2
    y = height - margin - side - 1.5 * cm

    pdf_canvas = canvas.Canvas(output_file, pagesize=pagesize)
    page_count = 0
    for game in games:
        for title, board in ((PAGE_TITLE, game.puzzle), (SOLUTION_TITLE, game.solution)):
            page_count += 1
            pdf_canvas.setFont("Helvetica-Bold", 16)
            pdf_canvas.drawString(margin, height - margin - 0.5 * cm, title)
            pdf_canvas.setFont("Helvetica", 9)
            pdf_canvas.drawString(
                margin, margin, f"ID: {game.puzzle_id} - {game.size}x{game.size} {game.difficulty}"
            )
            draw_grid(pdf_canvas, board, game.size, x, y, side)
            pdf_canvas.showPage()

    try:
        pdf_canvas.save()
    except OSError as e:
        raise ExportError(f"Could not write {output_file}: {e}") from e

    logger.info("Wrote %s (%d pages)", output_file, page_count)
    return page_count
