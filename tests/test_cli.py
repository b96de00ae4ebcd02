import pytest

from kyberlite.cli import main

LABELS = [
    "EK_PKE_T (Public key part): ",
    "EK_PKE_A (Public key part): ",
    "DK_PKE_S (Secret key, kept by Bob): ",
    "K (Alice's shared key): ",
    "C_U (Ciphertext part): ",
    "C_V (Ciphertext part): ",
    "K (Bob's recovered key): ",
]


def test_prints_sections_and_keys_agree(capsys):
    assert main(["--seed", "000102030405060708090a0b0c0d0e0f"]) == 0
    out = capsys.readouterr().out
    assert out.endswith("\n\n")
    sections = [s for s in out.split("\n\n") if s]
    assert len(sections) == len(LABELS)
    for section, label in zip(sections, LABELS):
        assert section.startswith(label)
    alice = sections[3][len(LABELS[3]):]
    bob = sections[6][len(LABELS[6]):]
    assert alice == bob
    assert alice.startswith("[") and alice.endswith("]")
    assert set(alice[1:-1].split(",")) <= {"0", "1"}
    assert sections[0][len(LABELS[0]):].startswith("[[[")


@pytest.mark.parametrize("seed", ["zz", "00ff"])
def test_bad_seed_is_rejected(seed, capsys):
    with pytest.raises(SystemExit):
        main(["--seed", seed])
    assert "seed" in capsys.readouterr().err