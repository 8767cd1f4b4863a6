import pytest

HEADER = """EESchema Schematic File Version 4
EELAYER 30 0
EELAYER END
$Descr A4 11693 8268
encoding utf-8
Sheet 1 1
Title "Test board"
Date ""
Rev ""
Comp ""
Comment1 ""
$EndDescr"""

FOOTER = """Wire Wire Line
	5000 3150 5000 3350
$EndSCHEMATC"""


def make_block(
    reference: str,
    value: str = "10k",
    symbol: str = "Device:R",
    unit: int = 1,
    footprint: str = "Resistor_SMD:R_0603_1608Metric",
    timestamp: str = "5C8A3F2B",
    x: int = 5000,
    y: int = 3000,
) -> str:
    """Text of one component block in KiCad 5 legacy format."""
    return "\n".join(
        [
            "$Comp",
            f"L {symbol} {reference}",
            f"U {unit} 1 {timestamp}",
            f"P {x} {y}",
            f'F 0 "{reference}" H {x + 70} {y + 46} 50  0000 L CNN',
            f'F 1 "{value}" H {x + 70} {y - 45} 50  0000 L CNN',
            f'F 2 "{footprint}" V {x - 70} {y} 50  0001 C CNN',
            f'F 3 "~" H {x} {y} 50  0001 C CNN',
            f"\t{unit}    {x} {y}",
            "\t1    0    0    -1  ",
            "$EndComp",
        ]
    )


def make_power_flag(reference: str = "#PWR01", value: str = "GND") -> str:
    return "\n".join(
        [
            "$Comp",
            f"L power:{value} {reference}",
            "U 1 1 5C8A4000",
            "P 5000 3500",
            f'F 0 "{reference}" H 5000 3250 50  0001 C CNN',
            f'F 1 "{value}" H 5005 3327 50  0000 C CNN',
            'F 2 "" H 5000 3500 50  0001 C CNN',
            'F 3 "" H 5000 3500 50  0001 C CNN',
            "\t1    5000 3500",
            "\t1    0    0    -1  ",
            "$EndComp",
        ]
    )


def make_schematic_text(*blocks: str) -> str:
    """Full schematic text with header, the given blocks and a footer."""
    return "\n".join([HEADER, *blocks, FOOTER]) + "\n"


# A realistic sheet: a dual op-amp (two units), resistors, capacitors,
# power flags, a user field, a hierarchical AR line and an unannotated part.
SAMPLE_SCH = make_schematic_text(
    make_block("U1", value="TL072", symbol="Amplifier_Operational:TL072",
               unit=1, footprint="Package_SO:SOIC-8_3.9x4.9mm_P1.27mm"),
    make_block("R1", value="100k"),
    make_power_flag("#PWR01", "GND"),
    make_block("R2", value="10k", x=5500),
    make_block("U1", value="TL072", symbol="Amplifier_Operational:TL072",
               unit=2, footprint="Package_SO:SOIC-8_3.9x4.9mm_P1.27mm", x=6000),
    make_block("C1", value="100n", symbol="Device:C",
               footprint="Capacitor_SMD:C_0603_1608Metric"),
    "\n".join(
        [
            "$Comp",
            "L Device:R R3",
            "U 1 1 5C8A5000",
            'AR Path="/5C8A0000/5C8A5000" Ref="R3"  Part="1" ',
            "P 6500 3000",
            'F 0 "R3" H 6570 3046 50  0000 L CNN',
            'F 1 "100k" H 6570 2955 50  0000 L CNN',
            'F 2 "Resistor_SMD:R_0603_1608Metric" V 6430 3000 50  0001 C CNN',
            'F 3 "~" H 6500 3000 50  0001 C CNN',
            'F 4 "RC0603FR-07100KL" H 6500 3000 50  0001 C CNN "MPN"',
            "\t1    6500 3000",
            "\t1    0    0    -1  ",
            "$EndComp",
        ]
    ),
    make_power_flag("#PWR02", "+5V"),
    make_block("R?", value="1k", x=7000),
)


@pytest.fixture
def sample_text():
    return SAMPLE_SCH


@pytest.fixture
def block():
    """Fixture that returns the component block builder."""
    return make_block


@pytest.fixture
def power_flag():
    return make_power_flag


@pytest.fixture
def schematic_text():
    """
    Fixture that returns a function assembling full schematic text.

    Usage:
        def test_something(schematic_text, block):
            text = schematic_text(block("R1"), block("R2"))
    """
    return make_schematic_text
