import sys

from afterburner_magic.classify.classifier import MagicClassifier
from afterburner_magic.classify.overrides import WordOverrideTable
from afterburner_magic.classify.rules import MagicRuleTable
from afterburner_magic.options import AfterburnerOptions
from afterburner_magic.render import MagicHighlighter
from afterburner_magic.resource.io import MagicResourceIO
from afterburner_magic.settings import MagicSettings
from afterburner_magic.util.log import open_logger, StreamLogger


class Afterburner:
    """ Container/factory for all common components, and the basis for using this package as a library. """

    def __init__(self, opts:AfterburnerOptions=None, *, parse_args=True) -> None:
        """ Start with the bare minimum of components and create the rest on demand. """
        if opts is None:
            opts = AfterburnerOptions()
        if parse_args:
            opts.parse()
        self._opts = opts

    class Component:
        """ Property-like descriptor to create a component if it does not exist, then save it over the attribute. """

        def __init__(self, func) -> None:
            self._func = func

        def __get__(self, instance, owner=None) -> object:
            value = self._func(instance)
            setattr(instance, self._func.__name__, value)
            return value

    @Component
    def logger(self) -> StreamLogger:
        """ Open a thread-safe logger that writes to both a log file and stderr (stdout may carry program output). """
        log_path = self._opts.log_path()
        return open_logger(log_path, to_stderr=True)

    @Component
    def resource_io(self) -> MagicResourceIO:
        return MagicResourceIO()

    @Component
    def _rule_tables(self) -> tuple:
        rules_path = self._opts.rules_path()
        tables = self.resource_io.load_rule_tables(rules_path)
        self.logger.log(f"Loaded magic rules from {rules_path}.")
        return tables

    @Component
    def magic_rules(self) -> MagicRuleTable:
        return self._rule_tables[0]

    @Component
    def skip_magic_rules(self) -> MagicRuleTable:
        return self._rule_tables[1]

    @Component
    def word_overrides(self) -> WordOverrideTable:
        """ Load and validate the curated word overrides. A bad pattern fails here, not during classification. """
        overrides_path = self._opts.overrides_path()
        overrides = self.resource_io.load_word_overrides(overrides_path)
        self.logger.log(f"Loaded {len(overrides)} word overrides from {overrides_path}.")
        return overrides

    @Component
    def classifier(self) -> MagicClassifier:
        return MagicClassifier(self.magic_rules, self.skip_magic_rules, self.word_overrides)

    @Component
    def settings(self) -> MagicSettings:
        """ Read user settings. Options with bad values are logged and fall back to defaults. """
        settings = MagicSettings.from_file(self._opts.config_path())
        for key in settings.read():
            self.logger.log(f"Ignoring invalid value for setting {key}.")
        return settings

    def highlighter(self) -> MagicHighlighter:
        """ Build a highlighter from the *current* settings. Settings may change, so this is not cached. """
        settings = self.settings
        return MagicHighlighter(self.classifier, settings.to_magic_options(), enabled=settings.highlighting_active())

    def has_input(self) -> bool:
        """ Return True if practice text was given on the command line (as a file or as arguments). """
        return bool(self._opts.input_path() or self._opts.extras())

    def input_text(self) -> str:
        """ Return practice text from the input file, the extra command-line arguments, or stdin (in that order). """
        input_path = self._opts.input_path()
        if input_path:
            with open(input_path, 'r', encoding='utf-8') as fp:
                return fp.read().rstrip("\n")
        extras = self._opts.extras()
        if extras:
            return "\n".join(extras)
        return sys.stdin.read().rstrip("\n")
