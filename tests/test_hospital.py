import pytest

from algobox.hospital import Hospital, HospitalFullError, Patient, main


def _feed(monkeypatch, lines):
    answers = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


def test_patients_ordered_by_descending_severity():
    hospital = Hospital()
    for pid, severity in [(1, 3), (2, 9), (3, 5), (4, 1)]:
        hospital.add(Patient(pid, f"p{pid}", 40, severity))
    severities = [p.severity for p in hospital]
    assert severities == sorted(severities, reverse=True)
    assert len(hospital) == 4


def test_treat_returns_most_severe_and_removes_it():
    hospital = Hospital()
    hospital.add(Patient(1, "Low", 20, 2))
    severe = Patient(2, "High", 30, 8)
    hospital.add(severe)
    assert hospital.treat() == severe
    assert [p.name for p in hospital] == ["Low"]


def test_ties_follow_exchange_order():
    hospital = Hospital()
    hospital.add(Patient(1, "A", 1, 5))
    hospital.add(Patient(2, "B", 1, 5))
    hospital.add(Patient(3, "C", 1, 9))
    assert [p.name for p in hospital] == ["C", "B", "A"]


def test_full_hospital_raises():
    hospital = Hospital(capacity=1)
    hospital.add(Patient(1, "A", 1, 1))
    with pytest.raises(HospitalFullError):
        hospital.add(Patient(2, "B", 1, 1))
    assert len(hospital) == 1


def test_treat_empty_raises():
    with pytest.raises(IndexError):
        Hospital().treat()


def test_main_admits_and_treats(monkeypatch, capsys):
    _feed(monkeypatch, ["1", "7", "Alice", "30", "5", "3", "2", "3", "4"])
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Patient Alice added successfully!" in out
    assert "7\tAlice\t\t30\t5" in out
    assert "Treating patient Alice (ID: 7, Severity: 5)" in out
    assert "No patients in hospital." in out
    assert "Exiting..." in out


def test_main_invalid_choice(monkeypatch, capsys):
    _feed(monkeypatch, ["9", "4"])
    main([])
    assert "Invalid choice!" in capsys.readouterr().out