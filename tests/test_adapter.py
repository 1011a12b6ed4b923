from patternkit.adapter import GamePlayer, GamePlayerAdapter, MusicPlayer, play


def test_play(capsys):
    assert play(MusicPlayer(src="music.mp3")) == "play music: music.mp3"
    adapter = GamePlayerAdapter(game=GamePlayer(src="game.mp4"))
    assert play(adapter) == "play sound: game.mp4"
    assert capsys.readouterr().out == (
        "play music: music.mp3\nplay sound: game.mp4\n"
    )


def test_adapter_delegates_to_game():
    game = GamePlayer("a.wav")
    assert GamePlayerAdapter(game).play_music() == game.play_sound()