SEPARATOR = '*' * 100


def format_grid(grid):
    """Render grid as bar-separated fixed-width fields, blank for empty cells"""
    lines = []
    for row in range(9):
        fields = ''.join(f"{cell.value if cell.value is not None else '':<5} | "
                         for cell in grid.row(row))
        lines.append(f"| {fields}")

    lines.append(SEPARATOR)
    lines.append('')

    return '\n'.join(lines)


def print_grid(grid, title=None):
    """Print grid to console"""
    if title:
        print(f"\n{title}")
    print(format_grid(grid))
