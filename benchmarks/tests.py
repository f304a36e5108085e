""" Benchmark test generators for the classifier and its front ends. Counts are tailored for a reasonable running time. """


# Setup functions for fixtures and test data. Some benchmarks count import time, so all imports are local.

def _afterburner():
    from afterburner_magic import Afterburner
    return Afterburner(parse_args=False)


def _random(seed:int=None):
    from random import Random
    return Random(seed)


def _random_words(n:int) -> list:
    """ Make pseudo-words from letters that trigger many rules, plus the curated override words. """
    rnd = _random(n)
    letters = 'aeghinoqstuxy'
    words = ['queue', 'institute', 'amusement', 'quieted']
    while len(words) < n:
        words.append(''.join([rnd.choice(letters) for _ in range(rnd.randint(1, 12))]))
    rnd.shuffle(words)
    return words[:n]


def _random_lines(n:int, width=10) -> list:
    words = _random_words(n * width)
    return [' '.join(words[i:i + width]) for i in range(0, len(words), width)]


def _all_options() -> list:
    """ Every combination of the five boolean options. """
    from itertools import product
    from afterburner_magic import MagicOptions
    keys = ['suppress_skip_magic_after_magic', 'suppress_skip_magic_after_skip_magic',
            'suppress_magic_after_skip_magic', 'suppress_skip_magic_after_space', 'word_overrides_enabled']
    return [MagicOptions(**dict(zip(keys, values))) for values in product([False, True], repeat=len(keys))]


# Main benchmark functions. Each returns a no-arg callable suitable for profiling a particular component.

def app_start():
    def run() -> None:
        _afterburner().highlighter()
    return run


def classify(n=2000):
    from afterburner_magic import get_magic_type
    lines = _random_lines(n)
    def run() -> None:
        for line in lines:
            for i in range(len(line)):
                get_magic_type(line, i)
    return run


def classify_options(n=100):
    from afterburner_magic.classify.classifier import DEFAULT_CLASSIFIER
    lines = _random_lines(n)
    options = _all_options()
    def run() -> None:
        for opts in options:
            for line in lines:
                DEFAULT_CLASSIFIER.classify_all(line, opts)
    return run


def repeated_letters(n=100000):
    """ Worst case for the suppression lookbacks: every position matches every rule. """
    from afterburner_magic.classify.classifier import DEFAULT_CLASSIFIER
    from afterburner_magic import MagicOptions
    line = 'e' * n
    opts = MagicOptions.all_on().replace(suppress_skip_magic_after_magic=False)
    def run() -> None:
        DEFAULT_CLASSIFIER.classify_all(line, opts)
    return run


def annotate(n=2000):
    text = '\n'.join(_random_lines(n))
    highlighter = _afterburner().highlighter()
    def run() -> None:
        highlighter.annotate(text)
    return run


def html(n=2000):
    text = '\n'.join(_random_lines(n))
    highlighter = _afterburner().highlighter()
    def run() -> None:
        highlighter.to_html(text)
    return run
