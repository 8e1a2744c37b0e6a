import pytest

from sigtalk.protocol import (
    BonusDecoder,
    Decoder,
    Reply,
    encode_byte,
    encode_message,
)


def _run(decoder, sender, bits):
    out = bytearray()
    replies = []
    for bit in bits:
        reply, byte = decoder.feed(sender, bit)
        replies.append(reply)
        if byte is not None:
            out.append(byte)
    return bytes(out), replies


def test_encode_byte_msb_first():
    assert encode_byte(ord("A")) == (0, 1, 0, 0, 0, 0, 0, 1)


def test_encode_zero_byte():
    assert encode_byte(0) == (0,) * 8


def test_signed_byte_matches_unsigned():
    assert encode_byte(-1) == encode_byte(255)
    assert encode_byte(-128) == encode_byte(128)


@pytest.mark.parametrize("value", [256, -129, 1000])
def test_encode_byte_out_of_range(value):
    with pytest.raises(ValueError):
        encode_byte(value)


@pytest.mark.parametrize("value", range(0, 256, 17))
def test_encode_byte_round_trip(value):
    bits = encode_byte(value)
    assert int("".join(map(str, bits)), 2) == value


def test_encode_message_length():
    data = b"hello"
    assert len(list(encode_message(data))) == len(data) * 8
    assert len(list(encode_message(data, terminate=True))) == (len(data) + 1) * 8


def test_encode_message_str_is_utf8():
    text = "héllo"
    assert list(encode_message(text)) == list(encode_message(text.encode()))


@pytest.mark.parametrize("message", [b"", b"a", b"hello, world", bytes(range(1, 256))])
def test_decoder_round_trip(message):
    decoded, replies = _run(Decoder(), 100, encode_message(message))
    assert decoded == message
    assert all(reply is Reply.ACK for reply in replies)


def test_decoder_sender_change_drops_partial_byte():
    decoder = Decoder()
    _run(decoder, 1, encode_byte(ord("x"))[:3])
    decoded, _ = _run(decoder, 2, encode_message(b"ok"))
    assert decoded == b"ok"


def test_decoder_passes_zero_bytes():
    decoded, _ = _run(Decoder(), 7, encode_message(b"a\x00b"))
    assert decoded == b"a\x00b"


@pytest.mark.parametrize("message", [b"", b"hi", "ünïcode".encode()])
def test_bonus_round_trip_with_terminator(message):
    decoded, replies = _run(BonusDecoder(), 55, encode_message(message, terminate=True))
    assert decoded == message
    assert replies[-1] is Reply.DONE
    assert all(reply is Reply.ACK for reply in replies[:-1])


def test_bonus_new_sender_after_done():
    decoder = BonusDecoder()
    _run(decoder, 10, encode_message(b"first", terminate=True))
    decoded, replies = _run(decoder, 11, encode_message(b"second", terminate=True))
    assert decoded == b"second"
    assert replies.count(Reply.DONE) == 1


def test_bonus_zero_count_survives_sender_change():
    decoder = BonusDecoder()
    _run(decoder, 1, [0, 0, 0, 0])
    _, replies = _run(decoder, 2, [0, 0, 0, 0])
    assert replies[-1] is Reply.DONE
    assert replies[:-1] == [Reply.ACK] * 3


def test_bonus_bytes_with_zero_bits_are_not_terminators():
    message = bytes([1, 128, 64])
    decoded, replies = _run(BonusDecoder(), 3, encode_message(message))
    assert decoded == message
    assert Reply.DONE not in replies