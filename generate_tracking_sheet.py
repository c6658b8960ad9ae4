#!/usr/bin/env python3
"""
Trainee Tracking Sheet: generate a printable per-session tracking sheet
(HTML -> open in browser -> Cmd+P / Ctrl+P to PDF) from a roster file.

Input: one trainee per line, pipe-delimited ("Name|Image URL").
Blank lines and lines without a pipe are ignored.

Output: tracking-sheet-print.html next to the input file.

Usage:
    python generate_tracking_sheet.py                 # reads ./images.txt
    python generate_tracking_sheet.py trainees.txt    # reads custom file
"""

import argparse
import html
import os
import subprocess
import sys

import numpy as np
import pandas as pd
import warnings
warnings.filterwarnings('ignore')

# ============================================================
# CONSTANTS
# ============================================================
SCRIPT_DIR = os.path.dirname(os.path.abspath(__file__))
DEFAULT_INPUT_NAME = "images.txt"
OUTPUT_NAME = "tracking-sheet-print.html"
DELIMITER = "|"

SHEET_TITLE = "Trainee Tracking Sheet"

# Fallback circle colors, assigned by position (wraps after 20)
PALETTE = [
    "#6c5ce7", "#00b894", "#e17055", "#0984e3", "#fdcb6e",
    "#e84393", "#00cec9", "#a29bfe", "#55a3e8", "#fd79a8",
    "#74b9ff", "#fab1a0", "#81ecec", "#636e72", "#d63031",
    "#2d3436", "#b2bec3", "#e67e22", "#1abc9c", "#9b59b6",
]

# Hand-marked fields, one inner list per row on the card
FIELD_ROWS = [
    [
        ("Attendance", "box", ["Present", "Absent", "Late"]),
        ("Participation", "circle", ["Low", "Medium", "High"]),
    ],
    [
        ("Comprehension", "circle", ["Struggling", "Getting there", "Solid"]),
    ],
]

GLYPH_CLASSES = {
    "box": ("checkbox-option", "box"),
    "circle": ("circle-option", "circle"),
}

OPEN_COMMANDS = {
    "darwin": ["open"],
    "linux": ["xdg-open"],
    "win32": ["cmd", "/c", "start", ""],
}


# ============================================================
# DATA LOADING
# ============================================================
def parse_trainees(raw):
    """Parse 'Name|Photo URL' lines into a DataFrame with name/photo columns."""
    lines = pd.Series(raw.split("\n"), dtype=object).str.strip()
    lines = lines[(lines != "") & lines.str.contains(DELIMITER, regex=False)]
    if lines.empty:
        return pd.DataFrame(columns=["name", "photo"])

    # Only the first two fields count; anything after a second pipe is dropped
    fields = lines.str.split(DELIMITER, regex=False, expand=True)
    df = pd.DataFrame({
        "name": fields[0].str.strip(),
        "photo": fields[1].fillna("").str.strip(),
    })
    df = df[df["name"] != ""].reset_index(drop=True)
    return df


def default_input():
    """images.txt beside this script; an installed copy falls back to the current directory."""
    beside = os.path.join(SCRIPT_DIR, DEFAULT_INPUT_NAME)
    if os.path.exists(beside):
        return beside
    return DEFAULT_INPUT_NAME


def load_trainees(input_file):
    """Read the roster file (UTF-8, BOM tolerated) and parse it."""
    with open(input_file, "r", encoding="utf-8-sig") as f:
        raw = f.read()
    return parse_trainees(raw)


# ============================================================
# NAME / COLOR UTILITIES
# ============================================================
def get_initials(name):
    """'Jane Middle Doe' -> 'JM'. Runs of whitespace never yield empty words."""
    return "".join(word[0] for word in name.split()).upper()[:2]


def assign_colors(trainees):
    out = trainees.copy()
    positions = np.arange(len(out)) % len(PALETTE)
    out["color"] = np.array(PALETTE, dtype=object)[positions]
    return out


# ============================================================
# CSS
# ============================================================
SHEET_CSS = """
  * { margin: 0; padding: 0; box-sizing: border-box; }
  body { font-family: Arial, Helvetica, sans-serif; font-size: 11px; color: #222; padding: 8px; }

  .page-header {
    text-align: center;
    padding: 10px 0 8px;
    border-bottom: 2px solid #333;
    margin-bottom: 10px;
  }
  .page-header h1 { font-size: 16px; margin-bottom: 4px; }
  .session-date { font-size: 13px; }
  .session-date span {
    display: inline-block;
    border-bottom: 1px solid #333;
    width: 200px;
    margin-left: 4px;
  }

  /* Trainee card */
  .trainee-card {
    display: flex;
    align-items: flex-start;
    border: 1px solid #999;
    border-radius: 4px;
    padding: 8px 10px;
    margin-bottom: 6px;
    page-break-inside: avoid;
    break-inside: avoid;
    gap: 12px;
  }
  .photo-col { flex: 0 0 100px; text-align: center; }
  .photo-col img {
    width: 100px; height: 100px;
    border-radius: 50%;
    object-fit: cover;
    display: block;
  }
  .photo-col .fallback {
    width: 100px; height: 100px;
    border-radius: 50%;
    color: #fff;
    font-size: 32px;
    font-weight: bold;
    align-items: center;
    justify-content: center;
    line-height: 100px;
    text-align: center;
  }
  .info-col { flex: 1; min-width: 0; }
  .name-row {
    font-size: 14px;
    font-weight: bold;
    margin-bottom: 5px;
    border-bottom: 1px solid #ddd;
    padding-bottom: 3px;
  }
  .trainee-num { color: #888; font-weight: normal; font-size: 11px; margin-right: 4px; }

  /* Hand-marked fields */
  .fields-row { display: flex; gap: 16px; flex-wrap: wrap; margin-bottom: 4px; }
  .field-group { display: flex; align-items: center; gap: 3px; }
  .field-label {
    font-weight: bold;
    font-size: 10px;
    text-transform: uppercase;
    color: #555;
    margin-right: 2px;
  }
  .checkbox-option, .circle-option {
    display: inline-flex;
    align-items: center;
    gap: 2px;
    margin-right: 6px;
    font-size: 10px;
  }
  .checkbox-option .box, .circle-option .circle {
    display: inline-block;
    width: 12px; height: 12px;
    border: 1.5px solid #555;
  }
  .checkbox-option .box { border-radius: 2px; }
  .circle-option .circle { border-radius: 50%; }

  /* Notes */
  .notes-label { font-size: 9px; color: #888; padding: 1px 0; }
  .notes-area {
    border: 1px solid #bbb;
    border-radius: 3px;
    height: 1.6cm;
    background:
      repeating-linear-gradient(
        transparent,
        transparent 0.53cm,
        #ddd 0.53cm,
        #ddd calc(0.53cm + 1px)
      );
    margin-top: 2px;
  }

  @media print {
    body { padding: 0; font-size: 10px; }
    .page-header { padding: 6px 0 5px; }
    .trainee-card { margin-bottom: 5px; padding: 6px 8px; }
    .notes-area { height: 1.4cm; }
  }

  @page {
    size: A4 portrait;
    margin: 10mm;
  }
"""


# ============================================================
# HTML GENERATION
# ============================================================
def field_group_html(label, glyph, options):
    option_class, glyph_class = GLYPH_CLASSES[glyph]
    opts = "\n".join(
        f'            <span class="{option_class}"><span class="{glyph_class}"></span> {opt}</span>'
        for opt in options
    )
    return f'''          <div class="field-group">
            <span class="field-label">{label}:</span>
{opts}
          </div>'''


def fields_html():
    rows = []
    for row in FIELD_ROWS:
        groups = "\n".join(field_group_html(*group) for group in row)
        rows.append(f'''        <div class="fields-row">
{groups}
        </div>''')
    return "\n".join(rows)


def trainee_card(name, photo, index, color):
    """One card: photo (initials circle on load error), name, fields and notes."""
    initials = html.escape(get_initials(name))
    safe_name = html.escape(name)
    safe_photo = html.escape(photo)

    return f'''
    <div class="trainee-card">
      <div class="photo-col">
        <img src="{safe_photo}" alt="{safe_name}" onerror="this.style.display='none';this.nextElementSibling.style.display='flex'">
        <div class="fallback" style="background:{color};display:none">{initials}</div>
      </div>
      <div class="info-col">
        <div class="name-row"><span class="trainee-num">{index + 1}.</span> {safe_name}</div>
{fields_html()}
        <div class="notes-label">Notes:</div>
        <div class="notes-area"></div>
      </div>
    </div>'''


def render_sheet(trainees):
    """Build the full printable document for the parsed trainees."""
    df = assign_colors(trainees)
    cards = "\n".join(
        trainee_card(t.name, t.photo, i, t.color)
        for i, t in enumerate(df.itertuples(index=False))
    )

    return f'''<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<title>{SHEET_TITLE}</title>
<style>{SHEET_CSS}</style>
</head>
<body>

<div class="page-header">
  <h1>{SHEET_TITLE}</h1>
  <div class="session-date">Session Date: <span>&nbsp;</span></div>
</div>

{cards}

</body>
</html>'''


# ============================================================
# OUTPUT
# ============================================================
def output_path_for(input_file):
    return os.path.join(os.path.dirname(input_file), OUTPUT_NAME)


def write_sheet(sheet_html, output_file):
    with open(output_file, "w", encoding="utf-8") as f:
        f.write(sheet_html)
    print(f"Written to {output_file}")


def open_command(path, platform=None):
    """Command that opens `path` with the OS default handler, or None."""
    platform = platform or sys.platform
    if platform.startswith("linux"):
        platform = "linux"
    base = OPEN_COMMANDS.get(platform)
    if base is None:
        return None
    return base + [path]


def open_in_browser(path):
    """Best effort; returns False (and tells the user) if it could not open."""
    cmd = open_command(path)
    if cmd is not None:
        try:
            subprocess.run(cmd, check=True)
            print("Opened in browser. Use Cmd+P (or Ctrl+P) to save as PDF.")
            return True
        except (OSError, subprocess.CalledProcessError):
            pass
    print("Could not auto-open. Please open the file manually in your browser.")
    return False


# ============================================================
# MAIN
# ============================================================
def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Generate a printable trainee tracking sheet from a 'Name|Image URL' file.")
    parser.add_argument("input_file", nargs="?",
                        help="roster file (default: images.txt next to this script, else in the current directory)")
    args = parser.parse_args(argv)

    input_file = args.input_file or default_input()
    trainees = load_trainees(input_file)
    if trainees.empty:
        print(f"No trainees found in {input_file}", file=sys.stderr)
        return 1

    print(f"Found {len(trainees)} trainees in {input_file}")

    output_file = output_path_for(input_file)
    write_sheet(render_sheet(trainees), output_file)
    open_in_browser(output_file)
    return 0


if __name__ == '__main__':
    sys.exit(main())
