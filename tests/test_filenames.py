from onemd_editor.core.filenames import is_usable_name, safe_asset_name, sanitize_name


def test_basic():
    assert sanitize_name("Hello World") == "Hello World"


def test_trims_whitespace():
    assert sanitize_name("  Work \t\n") == "Work"


def test_slashes():
    assert sanitize_name("a/b\\c") == "a_b_c"


def test_all_slashes_degrade_to_underscores():
    assert sanitize_name(" //\\ ") == "___"


def test_unicode_kept():
    assert sanitize_name("Заметки ✓") == "Заметки ✓"


def test_reserved_names_pass_through():
    assert sanitize_name("CON") == "CON"


def test_unusable_names():
    assert not is_usable_name(sanitize_name("   "))
    assert not is_usable_name("..")
    assert not is_usable_name(".")
    assert is_usable_name(sanitize_name("../x"))


def test_asset_name_plain():
    assert safe_asset_name("photo.jpg") == "photo.jpg"


def test_asset_name_drops_directories():
    assert safe_asset_name("../../evil.png") == "evil.png"
    assert safe_asset_name("/etc/passwd") == "passwd"
    assert safe_asset_name("..\\..\\evil.png") == "evil.png"


def test_asset_name_fallback():
    assert safe_asset_name("") == "image.png"
    assert safe_asset_name(None) == "image.png"
    assert safe_asset_name("..") == "image.png"
    assert safe_asset_name("/") == "image.png"
