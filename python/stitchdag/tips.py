def update_tips(tips: set[int], new: int, parents) -> None:
    """
    Update the frontier in-place after block `new` with `parents` was added.

    A parent leaves the tip set unless it is the only tip left. Hence a
    single tip referenced by a new block stays a tip next to its child.
    """
    for p in parents:
        if len(tips) > 1 or p not in tips:
            tips.discard(p)
    tips.add(new)
