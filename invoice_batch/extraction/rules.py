"""
Pattern Rule Set Module.

This module loads the externally supplied pattern rules (one regular
expression per invoice field) and compiles them once into an immutable
RuleSet that is shared read-only by every worker.

Rule files are JSON objects (the original template.json format) or YAML
mappings with the keys:

    fatura, cliente_matricula, data_inicio, valor, prazo_meses

The camelCase spellings clienteMatricula, dataInicio and prazoMeses are
accepted as aliases.

Usage:
    from invoice_batch.extraction.rules import load_rules

    rules = load_rules("template.json")
    match = rules.valor.search(text)
"""

import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Union

import yaml

from invoice_batch.utils.logger import get_logger
from invoice_batch.utils.exceptions import RuleSetError
from invoice_batch.utils.helpers import get_file_extension

# Initialize module logger
logger = get_logger(__name__)

RULE_NAMES = ('fatura', 'cliente_matricula', 'data_inicio', 'valor', 'prazo_meses')

RULE_ALIASES = {
    'clienteMatricula': 'cliente_matricula',
    'dataInicio': 'data_inicio',
    'prazoMeses': 'prazo_meses',
}


@dataclass(frozen=True)
class RuleSet:
    """
    Compiled pattern rules, one per extracted field.

    Attributes:
        fatura: Invoice number pattern (group 1)
        cliente_matricula: Client name pattern (group 1)
        data_inicio: Start date pattern (groups 1-3: day, month, year)
        valor: Amount pattern (group 1)
        prazo_meses: Term in months pattern (group 1)
        source: Where the rules were loaded from
    """
    fatura: re.Pattern
    cliente_matricula: re.Pattern
    data_inicio: re.Pattern
    valor: re.Pattern
    prazo_meses: re.Pattern
    source: str = "<memory>"

    @classmethod
    def from_mapping(
        cls,
        patterns: Mapping[str, Any],
        source: str = "<memory>"
    ) -> 'RuleSet':
        """
        Build a RuleSet from a mapping of rule names to pattern strings.

        Args:
            patterns: Rule name to pattern string. Aliases are accepted;
                unknown names are ignored with a warning.
            source: Label used in errors and logs.

        Returns:
            Compiled RuleSet.

        Raises:
            RuleSetError: If a rule is missing, is not a string, or does
                not compile.
        """
        normalized: Dict[str, Any] = {}
        for name, value in patterns.items():
            canonical = RULE_ALIASES.get(name, name)
            if canonical not in RULE_NAMES:
                logger.warning(f"Ignoring unknown rule '{name}' in {source}")
                continue
            normalized[canonical] = value

        compiled: Dict[str, re.Pattern] = {}
        for name in RULE_NAMES:
            if name not in normalized:
                raise RuleSetError(source, "missing rule", rule=name)

            pattern = normalized[name]
            if not isinstance(pattern, str):
                raise RuleSetError(
                    source,
                    f"pattern must be a string, got {type(pattern).__name__}",
                    rule=name
                )

            try:
                compiled[name] = re.compile(pattern)
            except re.error as e:
                raise RuleSetError(source, f"pattern does not compile: {e}", rule=name)

        return cls(source=source, **compiled)

    @property
    def patterns(self) -> Dict[str, str]:
        """Original pattern strings keyed by rule name."""
        return {name: getattr(self, name).pattern for name in RULE_NAMES}


def load_rules(filepath: Union[str, Path]) -> RuleSet:
    """
    Load and compile a pattern rule file.

    Args:
        filepath: Path to a .json, .yaml or .yml rule file.

    Returns:
        Compiled RuleSet.

    Raises:
        RuleSetError: If the file is missing, unreadable, malformed or
            contains an invalid rule.

    Example:
        >>> rules = load_rules("config/template.json")
        >>> rules.source
        'config/template.json'
    """
    path = Path(filepath)
    source = str(path)

    if not path.is_file():
        raise RuleSetError(source, "file not found")

    try:
        content = path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise RuleSetError(source, f"cannot read file: {e}")

    extension = get_file_extension(path)
    try:
        if extension in ('.yaml', '.yml'):
            data = yaml.safe_load(content)
        else:
            data = json.loads(content)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise RuleSetError(source, f"malformed rule file: {e}")

    if not isinstance(data, dict):
        raise RuleSetError(source, "rule file must contain an object of named patterns")

    rules = RuleSet.from_mapping(data, source=source)
    logger.info(f"Loaded {len(RULE_NAMES)} pattern rules from {path.name}")
    return rules
