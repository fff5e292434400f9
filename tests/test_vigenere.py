from vigenere import decrypt, encrypt, generate_keystream, transform, Mode


def test_vigenere_known_vector_encrypt():
    assert encrypt("HELLO WORLD", "KEY") == "RIJVS UYVJN"


def test_vigenere_known_vector_decrypt():
    assert decrypt("RIJVS UYVJN", "KEY") == "HELLO WORLD"


def test_vigenere_encrypt_decrypt():
    msg = "Attack at dawn! Meet @ 10:45, by the old mill."
    enc = encrypt(msg, "Lemon")
    assert enc != msg
    assert decrypt(enc, "Lemon") == msg


def test_vigenere_shift():
    ks = generate_keystream("abc", "B")
    assert transform("abc", ks, Mode.ENCRYPT) == "bcd"
    assert transform("bcd", ks, Mode.DECRYPT) == "abc"
