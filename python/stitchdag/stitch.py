from typing import Optional
import logging

log = logging.getLogger(__name__)


def maybe_stitch(dag, threshold: int = 10) -> Optional[int]:
    """
    Collapse a fragmented frontier. If the DAG has more than `threshold`
    tips, append one merge block referencing all of them and return its id.
    Otherwise do nothing and return None.

    The merge block goes through the regular insertion path; it is colored
    and updates tips and selected parent like any other block.
    """
    with dag._lock:
        if len(dag._tips) <= threshold:
            return None

        all_tips = sorted(dag._tips)
        log.info(f"stitching {len(all_tips)} tips (threshold {threshold})")
        merge = dag.insert(all_tips)
        log.info(f"merge block {merge} references {len(all_tips)} tips")
        return merge
