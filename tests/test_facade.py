from patternkit.facade import Count, Facade, Music, Video


def test_server_info():
    facade = Facade(Music("love"), Count(12, 30, 5), Video(1))
    assert facade.server_info() == {"music": "love", "video": 1, "comment": 12}


def test_server_info_follows_services():
    facade = Facade(Music("love"), Count(12, 30, 5), Video(1))
    facade.count.comment = 40
    assert facade.server_info()["comment"] == 40