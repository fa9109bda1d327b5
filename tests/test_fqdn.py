from typosee.fqdn import fqdn_from_record, normalize_line, split_labels


def test_normalize_line_strips_endings_comma_and_case():
    assert normalize_line("Google,\r\n") == "google"
    assert normalize_line("  PayPal\n") == "paypal"


def test_fqdn_from_csv_record():
    assert fqdn_from_record("4,4,4,Mail.Gogle.com\n") == "mail.gogle.com"
    assert fqdn_from_record("gogle.com") == "gogle.com"


def test_split_labels_skips_tld():
    assert split_labels("mail.gogle.com") == ["mail", "gogle"]
    assert split_labels("gogle.co.uk") == ["gogle", "co"]


def test_split_labels_single_label_and_empties():
    assert split_labels("localhost") == ["localhost"]
    assert split_labels("a..b.com") == ["a", "b"]
    assert split_labels("") == []
