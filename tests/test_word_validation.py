import requests

from wordle_game.services.word_validation import WordValidationService


class FakeResponse:
    def __init__(self, ok):
        self.ok = ok


class FakeHttp:
    def __init__(self, known=(), fail=False):
        self.known = set(known)
        self.fail = fail
        self.urls = []

    def get(self, url, timeout=None):
        self.urls.append(url)
        if self.fail:
            raise requests.ConnectionError("dictionary unreachable")
        return FakeResponse(url.rsplit("/", 1)[-1] in self.known)


def test_known_word_is_real():
    http = FakeHttp(known={"crane"})
    service = WordValidationService(api_url="https://dict.test/", session=http)
    assert service.is_real_word("CRANE")
    assert http.urls == ["https://dict.test/crane"]


def test_unknown_word_is_not_real():
    service = WordValidationService(session=FakeHttp(known={"crane"}))
    assert not service.is_real_word("qwxyz")


def test_lookup_failure_falls_back_to_format_rule():
    service = WordValidationService(session=FakeHttp(fail=True))
    assert service.is_real_word("qwxyz")
    assert not service.is_real_word("qw3yz")
    assert not service.is_real_word("toolong")


def test_validate_words_preserves_order():
    service = WordValidationService(session=FakeHttp(known={"crane", "lofty", "bumps"}), max_workers=3)
    result = service.validate_words(["lofty", "qwxyz", "crane", "zzzzq", "bumps"])
    assert result.valid == ["lofty", "crane", "bumps"]
    assert result.invalid == ["qwxyz", "zzzzq"]


def test_validate_no_words():
    http = FakeHttp()
    result = WordValidationService(session=http).validate_words([])
    assert result.valid == [] and result.invalid == []
    assert http.urls == []
