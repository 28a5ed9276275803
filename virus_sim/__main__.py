import argparse
import logging

from . import constants as c
from .errors import ConfigurationError
from .simulation import Simulation, run_headless

logger = logging.getLogger("virus_sim")


def build_parser():
    ap = argparse.ArgumentParser(
        prog="virus-sim",
        description="Run the infection simulation headless and report the outcome.",
    )
    ap.add_argument("--duration", type=float, default=c.DEFAULT_DURATION,
                    help="Run length in seconds of wall-clock time")
    ap.add_argument("--agents", type=int, default=c.DEFAULT_NUM_AGENTS)
    ap.add_argument("--infected", type=int, default=c.DEFAULT_NUM_INFECTED,
                    help="Agents infected at the start (the first ones created)")
    ap.add_argument("--max-ticks", type=int, default=None,
                    help="Stop after this many ticks even if time remains")
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--fast", action="store_true",
                    help="Do not wait between ticks")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def main(argv=None):
    ap = build_parser()
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        sim = Simulation(args.duration, args.agents, args.infected, seed=args.seed)
    except ConfigurationError as exc:
        ap.error(str(exc))

    ticks = run_headless(sim, max_ticks=args.max_ticks, tick_interval=0.0 if args.fast else c.DT)

    counts = sim.state_counts()
    summary = ", ".join(f"{state.name.lower()}={n}" for state, n in counts.items())
    logger.info("Done after %d ticks (%.2fs): %s", ticks, sim.elapsed(), summary)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
