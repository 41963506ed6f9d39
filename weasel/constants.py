from weasel.fraction import Fraction

DEFAULT_TARGET: str = "METHINKS IT IS LIKE A WEASEL"
DEFAULT_OFFSPRING: int = 100
DEFAULT_ALPHABET: str = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz "
DEFAULT_MUTATION_RATE: Fraction = Fraction.unchecked(0.05)
DEFAULT_FITNESS: str = "positional"
