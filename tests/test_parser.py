import pytest

from embjson.buffer import DynamicJsonBuffer
from embjson.parser import JsonParser


@pytest.fixture
def buffer():
    return DynamicJsonBuffer()


# Nested


def test_array_nested_in_object(buffer):
    obj = buffer.parse_object(' { "ab" : [ 1 , 2 ] , "cd" : [ 3 , 4 ] } ')
    array1 = obj["ab"].as_array()
    array2 = obj["cd"].as_array()
    array3 = obj["ef"].as_array()

    assert obj.success() is True
    assert array1.success() is True
    assert array2.success() is True
    assert array3.success() is False

    assert array1.size() == 2
    assert array2.size() == 2
    assert array3.size() == 0

    assert array1[0].as_(int) == 1
    assert array1[1].as_(int) == 2
    assert array2[0].as_(int) == 3
    assert array2[1].as_(int) == 4
    assert array3[0].as_(int) == 0


def test_object_nested_in_array(buffer):
    array = buffer.parse_array(' [ { "a" : 1 , "b" : 2 } , { "c" : 3 , "d" : 4 } ] ')
    object1 = array[0].as_object()
    object2 = array[1].as_object()
    object3 = array[2].as_object()

    assert array.success() is True
    assert object1.success() is True
    assert object2.success() is True
    assert object3.success() is False

    assert object1.size() == 2
    assert object2.size() == 2
    assert object3.size() == 0

    assert object1["a"].as_(int) == 1
    assert object1["b"].as_(int) == 2
    assert object2["c"].as_(int) == 3
    assert object2["d"].as_(int) == 4
    assert object3["e"].as_(int) == 0


# Nesting limit


@pytest.mark.parametrize(
    "limit, good, bad",
    [
        (0, "[]", "[[]]"),
        (1, "[[]]", "[[[]]]"),
        (2, "[[[]]]", "[[[[]]]]"),
    ],
)
def test_array_nesting_limit(limit, good, bad):
    assert DynamicJsonBuffer().parse_array(good, limit).success() is True
    assert DynamicJsonBuffer().parse_array(bad, limit).success() is False


@pytest.mark.parametrize(
    "limit, good, bad",
    [
        (0, "{}", '{"key":{}}'),
        (1, '{"key":{}}', '{"key":{"key":{}}}'),
        (2, '{"key":{"key":{}}}', '{"key":{"key":{"key":{}}}}'),
    ],
)
def test_object_nesting_limit(limit, good, bad):
    assert DynamicJsonBuffer().parse_object(good, limit).success() is True
    assert DynamicJsonBuffer().parse_object(bad, limit).success() is False


# Objects


@pytest.mark.parametrize("text", ["}", "{", '{"key"}', "{key}", 'null:"value"}'])
def test_parse_object_fails(buffer, text):
    assert buffer.parse_object(text).success() is False


def test_empty_object(buffer):
    obj = buffer.parse_object("{}")
    assert obj.success() is True
    assert obj.size() == 0


@pytest.mark.parametrize(
    "text",
    [
        '{"key":"value"}',
        "{'key':'value'}",
        "{key:value}",
        '{ "key":"value"}',
        '{"key" :"value"}',
        '{"key": "value"}',
        '{"key":"value" }',
    ],
)
def test_one_string(buffer, text):
    obj = buffer.parse_object(text)
    assert obj.success() is True
    assert obj.size() == 1
    assert obj["key"].as_string() == "value"


@pytest.mark.parametrize(
    "text",
    [
        '{"key1":"value1","key2":"value2"}',
        '{"key1":"value1" ,"key2":"value2"}',
        '{"key1":"value1", "key2":"value2"}',
    ],
)
def test_two_strings(buffer, text):
    obj = buffer.parse_object(text)
    assert obj.success() is True
    assert obj.size() == 2
    assert obj["key1"].as_string() == "value1"
    assert obj["key2"].as_string() == "value2"


def test_ending_with_a_comma(buffer):
    obj = buffer.parse_object('{"key1":"value1",}')
    assert obj.success() is False
    assert obj.size() == 0


def test_two_integers(buffer):
    obj = buffer.parse_object('{"key1":42,"key2":-42}')
    assert obj.success() is True
    assert obj.size() == 2
    assert obj["key1"].as_(int) == 42
    assert obj["key2"].as_(int) == -42


def test_two_doubles(buffer):
    obj = buffer.parse_object('{"key1":12.345,"key2":-7E89}')
    assert obj.success() is True
    assert obj.size() == 2
    assert obj["key1"].as_(float) == 12.345
    assert obj["key2"].as_(float) == -7e89


def test_two_booleans(buffer):
    obj = buffer.parse_object('{"key1":true,"key2":false}')
    assert obj.success() is True
    assert obj.size() == 2
    assert obj["key1"].as_(bool) is True
    assert obj["key2"].as_(bool) is False


def test_two_nulls(buffer):
    obj = buffer.parse_object('{"key1":null,"key2":null}')
    assert obj.success() is True
    assert obj.size() == 2
    assert obj["key1"].as_string() is None
    assert obj["key2"].as_string() is None


def test_escapes_and_comments(buffer):
    array = buffer.parse_array('/* c */ ["a\\nb", // line\n "q\\"t"]')
    assert array.success() is True
    assert array[0].as_string() == "a\nb"
    assert array[1].as_string() == 'q"t'


def test_parser_directly(buffer):
    parser = JsonParser(buffer, "[1,2,3]", 10)
    array = parser.parse_array()
    assert [item.as_(int) for item in array] == [1, 2, 3]


# Integration


OPEN_WEATHER_MAP = (
    "{\"coord\":{\"lon\":145.77,\"lat\":-16.92},\"sys\":{\"type\":1,\"id\":"
    "8166,\"message\":0.1222,\"country\":\"AU\",\"sunrise\":1414784325,"
    "\"sunset\":1414830137},\"weather\":[{\"id\":801,\"main\":\"Clouds\","
    "\"description\":\"few clouds\",\"icon\":\"02n\"}],\"base\":\"cmc "
    "stations\",\"main\":{\"temp\":296.15,\"pressure\":1014,\"humidity\":"
    "83,\"temp_min\":296.15,\"temp_max\":296.15},\"wind\":{\"speed\":2.22,"
    "\"deg\":114.501},\"clouds\":{\"all\":20},\"dt\":1414846800,\"id\":"
    "2172797,\"name\":\"Cairns\",\"cod\":200}"
)

YAHOO_QUERY_LANGUAGE = (
    "{\"query\":{\"count\":40,\"created\":\"2014-11-01T14:16:49Z\","
    "\"lang\":\"fr-FR\",\"results\":{\"item\":[{\"title\":\"Burkina army "
    "backs Zida as interim leader\"},{\"title\":\"British jets intercept "
    "Russian bombers\"},{\"title\":\"Doubts chip away at nation's most "
    "trusted agencies\"},{\"title\":\"Cruise ship stuck off Norway, no "
    "damage\"},{\"title\":\"U.S. military launches 10 air strikes in "
    "Syria, Iraq\"},{\"title\":\"Blackout hits Bangladesh as line from "
    "India fails\"},{\"title\":\"Burkina Faso president in Ivory Coast "
    "after ouster\"},{\"title\":\"Kurds in Turkey rally to back city "
    "besieged by IS\"},{\"title\":\"A majority of Scots would vote for "
    "independence now:poll\"},{\"title\":\"Tunisia elections possible "
    "model for region\"},{\"title\":\"Islamic State kills 85 more members "
    "of Iraqi tribe\"},{\"title\":\"Iraqi officials:IS extremists line "
    "up, kill 50\"},{\"title\":\"Burkina Faso army backs presidential "
    "guard official to lead transition\"},{\"title\":\"Kurdish peshmerga "
    "arrive with weapons in Syria's Kobani\"},{\"title\":\"Driver sought "
    "in crash that killed 3 on Halloween\"},{\"title\":\"Ex-Marine arrives "
    "in US after release from Mexico jail\"},{\"title\":\"UN panel "
    "scrambling to finish climate report\"},{\"title\":\"Investigators, "
    "Branson go to spacecraft crash site\"},{\"title\":\"Soldiers vie for "
    "power after Burkina Faso president quits\"},{\"title\":\"For a man "
    "without a party, turnout is big test\"},{\"title\":\"'We just had a "
    "hunch':US marshals nab Eric Frein\"},{\"title\":\"Boko Haram leader "
    "threatens to kill German hostage\"},{\"title\":\"Nurse free to move "
    "about as restrictions eased\"},{\"title\":\"Former Burkina president "
    "Compaore arrives in Ivory Coast:sources\"},{\"title\":\"Libyan port "
    "rebel leader refuses to hand over oil ports to rival "
    "group\"},{\"title\":\"Iraqi peshmerga fighters prepare for Syria "
    "battle\"},{\"title\":\"1 Dem Senate candidate welcoming Obama's "
    "help\"},{\"title\":\"Bikers cancel party after police recover "
    "bar\"},{\"title\":\"New question in Texas:Can Davis survive "
    "defeat?\"},{\"title\":\"Ukraine rebels to hold election, despite "
    "criticism\"},{\"title\":\"Iraqi officials say Islamic State group "
    "lines up, kills 50 tribesmen, women in Anbar "
    "province\"},{\"title\":\"James rebounds, leads Cavaliers past "
    "Bulls\"},{\"title\":\"UK warns travelers they could be terror "
    "targets\"},{\"title\":\"Hello Kitty celebrates 40th "
    "birthday\"},{\"title\":\"A look at people killed during space "
    "missions\"},{\"title\":\"Nigeria's purported Boko Haram leader says "
    "has 'married off' girls:AFP\"},{\"title\":\"Mexico orders immediate "
    "release of Marine veteran\"},{\"title\":\"As election closes in, "
    "Obama on center stage\"},{\"title\":\"Body of Zambian president "
    "arrives home\"},{\"title\":\"South Africa arrests 2 Vietnamese for "
    "poaching\"}]}}}"
)


def parse_then_print(text):
    return DynamicJsonBuffer().parse_object(text).print_to_buffer(10000)


def parse_then_pretty_print(text):
    obj = DynamicJsonBuffer().parse_object(text)
    return obj.to_pretty_string()


@pytest.mark.parametrize("text", [OPEN_WEATHER_MAP, YAHOO_QUERY_LANGUAGE])
def test_parse_then_print(text):
    assert parse_then_print(text) == text


@pytest.mark.parametrize("text", [OPEN_WEATHER_MAP, YAHOO_QUERY_LANGUAGE])
def test_parse_then_pretty_print_then_parse_then_print(text):
    intermediate = parse_then_pretty_print(text)
    assert "\r\n" in intermediate
    assert parse_then_print(intermediate) == text