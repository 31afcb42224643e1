"""
Position selectors used by the stone-removal rule.

The board never calls the random module directly; it asks a selector to
pick positions, so games can be replayed with a seed or a fixed script.
"""
import random


class RandomSelector:
    """
    Picks positions uniformly at random without replacement.
    """

    def __init__(self, seed=None):
        """
        Initialize the selector.

        Args:
            seed (int, optional): Random seed for reproducible behavior
        """
        self.rng = random.Random(seed)

    def pick(self, candidates, k):
        """
        Pick up to k distinct positions.

        Args:
            candidates (list): (row, col) tuples to choose from
            k (int): Number of positions wanted

        Returns:
            list: min(k, len(candidates)) distinct positions
        """
        k = min(k, len(candidates))
        if k <= 0:
            return []
        return self.rng.sample(list(candidates), k)


class ScriptedSelector:
    """
    Deterministic selector that replays a fixed list of positions.

    Scripted positions are consumed in order and used when they are among
    the candidates; once the script runs out (or a scripted position is not
    available) the earliest remaining candidates are taken.
    """

    def __init__(self, picks=()):
        self.picks = list(picks)

    def pick(self, candidates, k):
        remaining = list(candidates)
        chosen = []
        while len(chosen) < k and remaining:
            if self.picks:
                position = tuple(self.picks.pop(0))
                if position not in remaining:
                    continue
            else:
                position = remaining[0]
            remaining.remove(position)
            chosen.append(position)
        return chosen
