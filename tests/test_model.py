import random

import pytest

from cnpjkit import Cnpj, CnpjType, InvalidCnpjError, MalformedCnpjError, is_valid


def test_parse_masked():
    cnpj = Cnpj.parse("12.345.678/0001-95")
    assert cnpj.value == "12345678000195"
    assert cnpj.kind is CnpjType.NUMERIC
    assert cnpj.root == "12345678"
    assert cnpj.branch == "0001"
    assert cnpj.base == "123456780001"
    assert cnpj.check_digits == "95"
    assert cnpj.is_headquarters

def test_parse_alphanumeric():
    cnpj = Cnpj.parse("12abc34501de35")
    assert cnpj.kind is CnpjType.ALPHANUMERIC
    assert cnpj.branch == "01DE"
    assert not cnpj.is_headquarters

def test_parse_invalid_raises_with_raw():
    with pytest.raises(InvalidCnpjError) as exc:
        Cnpj.parse("12345678000100")
    assert exc.value.raw == "12345678000100"
    assert isinstance(exc.value, ValueError)

def test_str_and_repr():
    cnpj = Cnpj.parse("12345678000195")
    assert str(cnpj) == "12.345.678/0001-95"
    assert repr(cnpj) == "Cnpj('12.345.678/0001-95')"
    assert cnpj.formatted == "12.345.678/0001-95"

def test_is_immutable():
    cnpj = Cnpj.parse("12345678000195")
    with pytest.raises(AttributeError):
        cnpj.value = "11222333000181"

def test_equality_by_value():
    assert Cnpj.parse("12.345.678/0001-95") == Cnpj.parse("12345678000195")
    assert len({Cnpj.parse("12.345.678/0001-95"), Cnpj.parse("12345678000195")}) == 1

def test_from_base():
    assert Cnpj.from_base("12.ABC.345/01DE", CnpjType.ALPHANUMERIC).value == "12ABC34501DE35"
    assert Cnpj.from_base("123456780001", CnpjType.NUMERIC).value == "12345678000195"

def test_from_base_digits_as_alphanumeric_is_numeric():
    assert Cnpj.from_base("123456780001", CnpjType.ALPHANUMERIC).kind is CnpjType.NUMERIC

def test_from_base_rejects_bad_input():
    with pytest.raises(MalformedCnpjError):
        Cnpj.from_base("12ABC34501DE", CnpjType.NUMERIC)
    with pytest.raises(MalformedCnpjError):
        Cnpj.from_base("1234", CnpjType.NUMERIC)

def test_generate():
    cnpj = Cnpj.generate(CnpjType.ALPHANUMERIC, random.Random(8))
    assert cnpj.kind is CnpjType.ALPHANUMERIC
    assert is_valid(cnpj.value)
    assert Cnpj.parse(str(cnpj)) == cnpj

def test_direct_construction_is_validated():
    with pytest.raises(InvalidCnpjError):
        Cnpj("x", CnpjType.NUMERIC)
    with pytest.raises(InvalidCnpjError):
        Cnpj("12345678000100", CnpjType.NUMERIC)
    with pytest.raises(InvalidCnpjError):
        Cnpj("12.345.678/0001-95", CnpjType.NUMERIC)

def test_direct_construction_checks_kind():
    with pytest.raises(InvalidCnpjError):
        Cnpj("12345678000195", CnpjType.ALPHANUMERIC)
    with pytest.raises(InvalidCnpjError):
        Cnpj("12ABC34501DE35", CnpjType.NUMERIC)
    assert Cnpj("12ABC34501DE35", CnpjType.ALPHANUMERIC).root == "12ABC345"
