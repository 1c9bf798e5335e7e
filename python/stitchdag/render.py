from .coloring import Color

symbols = {Color.Blue: "B", Color.Red: "R"}


def describe(dag) -> str:
    sp = dag.selected_parent
    lines = [
        "=== DAG State ===",
        f"Blocks: {len(dag)} | Tips: {len(dag.tips)} | "
        f"Selected Parent: {sp} (color: {dag.color(sp).name})",
    ]
    for b in dag.blocks():
        block = dag.block(b)
        lines.append(
            f"{symbols[block.color]} Block {b} | Parents: {list(block.parents)} "
            f"| Past size: {len(dag.past(b))}"
        )
    lines.append("=================")
    return "\n".join(lines)
