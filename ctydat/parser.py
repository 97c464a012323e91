"""
Парсер формата CTY.DAT

https://www.country-files.com/cty-dat-format/

Каждая запись занимает одну или несколько строк:

    Finland:  15:  18:  EU:  61.38:  -24.82:  -2.0:  OH:
        OF,OG,OH,OI,OJ,=OH2ET/SA,...;

После алиаса могут идти замены:
    (#)      CQ зона
    [#]      ITU зона
    <#/#>    широта/долгота
    {aa}     континент
    ~#~      смещение от UTC
"""

import logging
import string
from typing import Callable, List, Optional, Tuple

from models.country import (
    CountryRecord, ExactCallsign, PrefixToken, CqZoneOverride, ItuZoneOverride,
    CoordinatesOverride, ContinentOverride, TimeOffsetOverride
)

DIGITS = frozenset(string.digits)
FLOAT_CHARS = frozenset(string.digits + '-.')
ALIAS_CHARS = frozenset(string.ascii_letters + string.digits + '/')

MIN_COUNTRY_NAME = 4  # Peru, Fiji
MAX_ZONE = 255

# Пробельные символы вокруг разделителей (Unicode White_Space).
# Управляющие \x1c-\x1f сюда не входят, хотя str.isspace() их пропускает
WHITESPACE = frozenset(
    ' \t\n\v\f\r\x85\xa0\u1680\u2028\u2029\u202f\u205f\u3000'
    + ''.join(chr(c) for c in range(0x2000, 0x200b))
)


def _is_field_char(c: str) -> bool:
    # печатные ASCII символы, кроме разделителя полей
    return ' ' <= c <= '~' and c != ':'


class ParseError(ValueError):
    """Ошибка разбора cty.dat: ожидаемая конструкция и позиция в тексте"""

    def __init__(self, label: str, position: int, line: int, column: int,
                 found: Optional[str] = None, detail: Optional[str] = None):
        self.label = label
        self.position = position
        self.line = line
        self.column = column
        self.found = found
        self.detail = detail
        super().__init__(str(self))

    def __str__(self):
        found = repr(self.found) if self.found is not None else 'конец файла'
        message = (f"Ожидалось: {self.label} (строка {self.line}, позиция {self.column}), "
                   f"найдено: {found}")
        if self.detail:
            message += f" - {self.detail}"
        return message


class CtyParser:
    """Рекурсивный парсер текста cty.dat"""

    def __init__(self, text: str, logger=None):
        self.text = text
        self.pos = 0
        self.logger = logger or logging.getLogger(__name__)

    def parse(self) -> List[CountryRecord]:
        """
        Разбирает весь текст.

        Returns:
            Список стран в порядке следования в файле

        Raises:
            ParseError: при первой же ошибке, частичный результат не возвращается
        """
        records = []
        self._skip_whitespace()
        while not self._at_end():
            records.append(self._parse_country())
            self._skip_whitespace()

        self.logger.debug(f"Разобрано {len(records)} записей cty.dat")
        return records

    # --- запись целиком ---

    def _parse_country(self) -> CountryRecord:
        start = self.pos
        country_name = self._take_while(_is_field_char).rstrip()
        if len(country_name) < MIN_COUNTRY_NAME:
            raise self._error('Country name', start,
                              detail=f"минимум {MIN_COUNTRY_NAME} символа")
        self._separator()

        cq_zone = self._parse_zone('CQ zone')
        self._separator()
        itu_zone = self._parse_zone('ITU zone')
        self._separator()
        continent = self._parse_continent()
        self._separator()
        latitude = self._parse_float('Latitude')
        self._separator()
        longitude = self._parse_float('Longitude')
        self._separator()
        time_offset = self._parse_float('Time offset')
        self._separator()

        start = self.pos
        primary_prefix = self._take_while(_is_field_char).rstrip()
        if not primary_prefix:
            raise self._error('Primary prefix', start)
        self._separator()

        alias_list = self._parse_alias_list()
        self._line_break()

        return CountryRecord(
            country_name=country_name,
            cq_zone=cq_zone,
            itu_zone=itu_zone,
            continent=continent,
            latitude=latitude,
            longitude=longitude,
            time_offset=time_offset,
            primary_prefix=primary_prefix,
            alias_list=alias_list
        )

    # --- поля ---

    def _parse_zone(self, label: str) -> int:
        start = self.pos
        digits = self._take_while(DIGITS.__contains__)
        if not digits:
            raise self._error(label, start)
        # длинную строку цифр не переводим в int, она заведомо больше MAX_ZONE
        if len(digits.lstrip('0')) > len(str(MAX_ZONE)):
            raise self._error(label, start, detail=f"число больше {MAX_ZONE}")
        value = int(digits)
        if value > MAX_ZONE:
            raise self._error(label, start, detail=f"число {value} больше {MAX_ZONE}")
        return value

    def _parse_continent(self) -> str:
        start = self.pos
        for _ in range(2):
            if self._at_end() or not _is_field_char(self.text[self.pos]):
                raise self._error('Continent', self.pos, detail="нужно ровно 2 символа")
            self.pos += 1
        return self.text[start:self.pos]

    def _parse_float(self, label: str) -> float:
        start = self.pos
        text = self._take_while(FLOAT_CHARS.__contains__)
        try:
            return float(text)
        except ValueError:
            raise self._error(label, start, detail=f"некорректное число {text!r}") from None

    # --- список алиасов ---

    def _parse_alias_list(self) -> Tuple:
        aliases = []
        while True:
            self._skip_whitespace()
            aliases.append(self._parse_alias())
            self._skip_whitespace()
            if self._accept(','):
                continue
            self._expect(';', "',' или ';'")
            return tuple(aliases)

    def _parse_alias(self):
        exact = self._accept('=')
        start = self.pos
        token = self._take_while(ALIAS_CHARS.__contains__)
        if not token:
            raise self._error('Exact callsign' if exact else 'DXCC prefix', start)
        overrides = self._parse_overrides()
        if exact:
            return ExactCallsign(token, overrides)
        return PrefixToken(token, overrides)

    def _parse_overrides(self) -> Tuple:
        overrides = []
        while True:
            c = self._peek()
            if c == '(':
                self.pos += 1
                overrides.append(CqZoneOverride(self._parse_zone('CQ zone')))
                self._expect(')', "')'")
            elif c == '[':
                self.pos += 1
                overrides.append(ItuZoneOverride(self._parse_zone('ITU zone')))
                self._expect(']', "']'")
            elif c == '{':
                self.pos += 1
                overrides.append(ContinentOverride(self._parse_continent()))
                self._expect('}', "'}'")
            elif c == '~':
                self.pos += 1
                overrides.append(TimeOffsetOverride(self._parse_float('Time offset')))
                self._expect('~', "'~'")
            elif c == '<':
                self.pos += 1
                latitude = self._parse_float('Latitude')
                self._expect('/', "'/'")
                longitude = self._parse_float('Longitude')
                self._expect('>', "'>'")
                overrides.append(CoordinatesOverride(latitude, longitude))
            else:
                return tuple(overrides)

    # --- разделители ---

    def _separator(self):
        self._skip_whitespace()
        self._expect(':', "':'")
        self._skip_whitespace()

    def _line_break(self):
        while self._peek() in (' ', '\t'):
            self.pos += 1
        if self._accept('\r'):
            self._accept('\n')
        elif not self._accept('\n'):
            raise self._error('Line break', self.pos)

    # --- низкоуровневые операции ---

    def _at_end(self) -> bool:
        return self.pos >= len(self.text)

    def _peek(self) -> Optional[str]:
        if self._at_end():
            return None
        return self.text[self.pos]

    def _accept(self, char: str) -> bool:
        if self._peek() == char:
            self.pos += 1
            return True
        return False

    def _expect(self, char: str, label: str):
        if not self._accept(char):
            raise self._error(label, self.pos)

    def _take_while(self, predicate: Callable[[str], bool]) -> str:
        start = self.pos
        while not self._at_end() and predicate(self.text[self.pos]):
            self.pos += 1
        return self.text[start:self.pos]

    def _skip_whitespace(self):
        while not self._at_end() and self.text[self.pos] in WHITESPACE:
            self.pos += 1

    def _error(self, label: str, position: int, detail: Optional[str] = None) -> ParseError:
        line = self.text.count('\n', 0, position) + 1
        column = position - (self.text.rfind('\n', 0, position) + 1) + 1
        found = self.text[position] if position < len(self.text) else None
        return ParseError(label, position, line, column, found=found, detail=detail)


def parse_cty(text: str, logger=None) -> List[CountryRecord]:
    """Разбирает текст cty.dat в список стран"""
    return CtyParser(text, logger).parse()
