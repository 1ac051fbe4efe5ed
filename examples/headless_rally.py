"""
Run Duel Pong without a window and print each point
"""

import argparse
import random

from duel_pong.core.physics import RoundController
from duel_pong.core.primitives import Command
from duel_pong.core.primitives import Side
from duel_pong.utils.config import GameConfig


def main():
    parser = argparse.ArgumentParser(description="Headless Duel Pong rally")
    parser.add_argument("--ticks", type=int, default=10000, help="Ticks to simulate")
    parser.add_argument("--seed", type=int, default=0, help="Seed for the random paddle moves")
    args = parser.parse_args()

    rng = random.Random(args.seed)
    controller = RoundController(GameConfig(ROUND_OVER_TICKS=30))
    bounces = 0

    for _ in range(args.ticks):
        for side in Side:
            controller.handle_command(side, rng.choice(list(Command)))

        events = controller.tick()
        bounces += len(events["wall_bounces"]) + len(events["paddle_hits"])
        for side_out in events["side_outs"]:
            winner, score = side_out["winner"], side_out["score"]
            print(f"tick {controller.tick_count}: point for {winner} {score}")

    print(f"Final score {controller.score} after {args.ticks} ticks and {bounces} bounces")


if __name__ == "__main__":
    main()
