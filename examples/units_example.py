#!/usr/bin/env python3
"""
Example demonstrating the datasize library.

This example walks through creating sizes, converting them between SI, IEC
and JEDEC units, picking natural units, and parsing and formatting text in
different locales.
"""

import sys
from decimal import Decimal
from pathlib import Path

# Add the src directory to sys.path so the example runs from a checkout
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.append(str(src_path))

from datasize import (  # noqa: E402
    BIT,
    BYTE,
    IEC,
    JEDEC,
    SI,
    DataSize,
    DataSizeFormatter,
    DataSizeParser,
    NaturalPolicy,
    ParseError,
    ParsePolicy,
    unit_catalog,
)
from datasize.core.logging import get_logger, update_log_level  # noqa: E402

# The package configures logging on import; raise the level for the demo
update_log_level("info")
log = get_logger(__name__)


def main():
    """Demonstrate the datasize library."""
    log.info("Datasize Example")
    log.info("================\n")

    # 1. Creating sizes
    log.info("1. Creating sizes")
    log.info("-----------------")

    download = DataSize(Decimal("3.5"), SI.GIGABYTE)
    memory = DataSize(16, IEC.GIBIBYTE)
    link = DataSize(100, SI.MEGABIT)
    payload = DataSize.of_bytes(b"hello, world")

    log.info(f"Download: {download}")
    log.info(f"Memory:   {memory}")
    log.info(f"Link:     {link}")
    log.info(f"Payload:  {payload}\n")

    # 2. Exact conversion
    log.info("2. Exact conversion")
    log.info("-------------------")

    log.info(f"{memory} = {memory.to_unit(SI.GIGABYTE)}")
    log.info(f"{memory} = {memory.to_unit(BYTE).format(precision=None)}")
    log.info(f"{link} = {link.to_unit(SI.MEGABYTE)}")
    log.info(f"1 bit = {DataSize(1, BIT).to_unit(SI.KILOBYTE).format(precision=None)}")
    log.info(f"1 KiB == 1 KB (JEDEC): {DataSize(1, IEC.KIBIBYTE) == DataSize(1, JEDEC.KILOBYTE)}\n")

    # 3. Arithmetic
    log.info("3. Arithmetic")
    log.info("-------------")

    free = memory - download
    log.info(f"{memory} - {download} = {free.format(precision=4)}")
    log.info(f"{download} - {memory} = {download - memory} (never negative)")
    log.info(f"Larger of the two: {DataSize.max(download, memory)}\n")

    # 4. Natural units
    log.info("4. Natural units")
    log.info("----------------")

    for size in (
        DataSize(7, BIT),
        DataSize(999, BYTE),
        DataSize(1536, BYTE),
        DataSize(1000, SI.KILOBYTE),
        DataSize(1024, JEDEC.KILOBYTE),
        DataSize(Decimal("1.048576"), SI.MEGABYTE),
    ):
        simple = size.to_natural_unit(NaturalPolicy.SIMPLE)
        smart = size.to_natural_unit(NaturalPolicy.SMART)
        log.info(f"{str(size):>14} -> simple: {str(simple):>10}, smart: {smart}")
    log.info("")

    # 5. Parsing and formatting
    log.info("5. Parsing and formatting")
    log.info("-------------------------")

    lenient = DataSizeParser(locale="en_US")
    strict = DataSizeParser(ParsePolicy.STRICT, locale="en_US")
    german = DataSizeFormatter.smart(locale="de_DE")

    for text in ("1 KB", "1 kB", "2.42 kilobytes", " 1,024 KiB "):
        log.info(f"{text!r:>18} lenient: {lenient.parse(text)!r}")
        try:
            log.info(f"{text!r:>18} strict:  {strict.parse(text)!r}")
        except ParseError as e:
            log.info(f"{text!r:>18} strict:  {e}")

    log.info(f"In German: {german.format(DataSize(1234567, BYTE))}\n")

    # 6. The unit catalog
    log.info("6. The unit catalog")
    log.info("-------------------")
    log.info(unit_catalog(JEDEC))


if __name__ == "__main__":
    main()
