import argparse
import logging

import numpy as np

import stitchdag
from stitchdag.config import Config
from stitchdag.dag import DAG
from stitchdag.reachability import provider
from stitchdag.render import describe

log = logging.getLogger("stitchdag")


def simulate(cfg: Config) -> DAG:
    dag = DAG(cfg.K, reachability=provider(cfg.REACHABILITY))
    rng = np.random.default_rng(cfg.SEED)

    log.info(
        f"simulating {cfg.N_BLOCKS} blocks with k={cfg.K}, "
        f"stitch threshold {cfg.STITCH_THRESHOLD}"
    )

    for i in range(1, cfg.N_BLOCKS + 1):
        current = sorted(dag.tips)
        n = min(len(current), cfg.MAX_PARENTS)
        parents = rng.choice(current, size=n, replace=False)
        dag.insert(int(p) for p in parents)

        if i % cfg.STITCH_INTERVAL == 0:
            dag.maybe_stitch(cfg.STITCH_THRESHOLD)

        if cfg.REPORT_INTERVAL > 0 and i % cfg.REPORT_INTERVAL == 0:
            print(describe(dag))
            print()

    print(
        f"Final state: {len(dag)} blocks, {len(dag.tips)} tips, "
        f"selected parent {dag.selected_parent}"
    )
    return dag


def main(argv=None):
    parser = argparse.ArgumentParser(prog="stitchdag")
    parser.add_argument("--version", action="store_true", help="print version")
    parser.add_argument("-k", type=int, help="k-cluster parameter")
    parser.add_argument("--blocks", type=int, help="number of blocks to append")
    parser.add_argument("--threshold", type=int, help="stitch threshold")
    parser.add_argument("--interval", type=int, help="stitch check interval")
    parser.add_argument("--max-parents", type=int, help="parents per block")
    parser.add_argument("--report", type=int, help="report interval, 0 disables")
    parser.add_argument("--seed", type=int, help="random seed")
    parser.add_argument(
        "--reachability", choices=["full_scan", "child_index"], default=None
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logs")
    args = parser.parse_args(argv)

    if args.version:
        print(stitchdag.__version__)
        return

    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        level=logging.DEBUG if args.verbose else logging.INFO,
    )

    overrides = dict(
        K=args.k,
        N_BLOCKS=args.blocks,
        STITCH_THRESHOLD=args.threshold,
        STITCH_INTERVAL=args.interval,
        MAX_PARENTS=args.max_parents,
        REPORT_INTERVAL=args.report,
        SEED=args.seed,
        REACHABILITY=args.reachability,
    )
    cfg = Config(**{k: v for k, v in overrides.items() if v is not None})
    simulate(cfg)


if __name__ == "__main__":
    main()
