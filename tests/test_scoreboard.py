"""Tests for daily scoreboard parsing."""

from __future__ import annotations

from datetime import date

from bs4 import BeautifulSoup

from bref_boxscores.normalization import TeamCodeLookup
from bref_boxscores.scrapers.scoreboard import parse_game_summary, parse_scoreboard
from bref_boxscores.scrapers.urls import scoreboard_url

GAME_DAY = date(2018, 10, 16)


class TestScoreboardUrl:
    def test_query_parameters(self):
        url = scoreboard_url("https://www.basketball-reference.com", date(2019, 2, 3))
        assert url == "https://www.basketball-reference.com/boxscores/?month=2&day=3&year=2019"


class TestParseScoreboard:
    """Tests for parse_scoreboard against a saved two-game page."""

    def test_one_record_per_game_block(self, scoreboard_soup):
        games = parse_scoreboard(scoreboard_soup, GAME_DAY)
        assert len(games) == len(scoreboard_soup.select(".game_summary")) == 2

    def test_document_order(self, scoreboard_soup):
        games = parse_scoreboard(scoreboard_soup, GAME_DAY)
        assert [g.home_team for g in games] == ["Boston", "Golden State"]

    def test_regulation_game(self, scoreboard_soup):
        game = parse_scoreboard(scoreboard_soup, GAME_DAY)[0]
        assert game.losing_team == "Philadelphia"
        assert game.winning_team == "Boston"
        assert game.losing_team_score == "87"
        assert game.winning_team_score == "105"
        assert game.status == "Final"
        assert game.away_team == "Philadelphia"
        assert game.home_team == "Boston"
        assert game.away_quarter_score == ["21", "21", "24", "21"]
        assert game.home_quarter_score == ["21", "21", "31", "32"]
        assert game.score_breakdown == "/boxscore/2018/10/16/PHI/BOS"
        assert game.player_breakdown == "/boxscore/2018/10/16/PHI/BOS/player"

    def test_overtime_periods_included(self, scoreboard_soup):
        game = parse_scoreboard(scoreboard_soup, GAME_DAY)[1]
        assert game.status == "F/OT"
        assert len(game.away_quarter_score) == len(game.home_quarter_score) == 5
        assert game.home_quarter_score[-1] == "14"
        assert game.score_breakdown == "/boxscore/2018/10/16/OKC/GSW"

    def test_winning_score_exceeds_losing(self, scoreboard_soup):
        for game in parse_scoreboard(scoreboard_soup, GAME_DAY):
            assert int(game.winning_team_score) > int(game.losing_team_score)

    def test_period_scores_sum_to_final(self, scoreboard_soup):
        for game in parse_scoreboard(scoreboard_soup, GAME_DAY):
            finals = {game.winning_team: game.winning_team_score, game.losing_team: game.losing_team_score}
            assert sum(map(int, game.away_quarter_score)) == int(finals[game.away_team])
            assert sum(map(int, game.home_quarter_score)) == int(finals[game.home_team])

    def test_no_games(self):
        soup = BeautifulSoup("<html><body><p>No games played on this date.</p></body></html>", "lxml")
        assert parse_scoreboard(soup, GAME_DAY) == []


class TestParseGameSummaryEdgeCases:
    """Missing nodes become null; the record is still produced."""

    def _block(self, html: str):
        return BeautifulSoup(f'<div class="game_summary">{html}</div>', "lxml").select_one(".game_summary")

    def test_unknown_team_leaves_links_null(self, scoreboard_soup):
        lookup = TeamCodeLookup({"Boston": "BOS"})
        game = parse_game_summary(scoreboard_soup.select_one(".game_summary"), GAME_DAY, lookup)
        assert game.away_team == "Philadelphia"
        assert game.score_breakdown is None
        assert game.player_breakdown is None

    def test_empty_block(self):
        game = parse_game_summary(self._block(""), GAME_DAY)
        assert game.winning_team is None
        assert game.status is None
        assert game.away_quarter_score == []
        assert game.home_quarter_score == []
        assert game.score_breakdown is None

    def test_missing_status_link(self):
        html = """
        <table><tbody>
          <tr class="loser"><td><a>Utah</a></td><td class="right">99</td></tr>
          <tr class="winner"><td><a>Denver</a></td><td class="right">101</td></tr>
        </tbody></table>
        """
        game = parse_game_summary(self._block(html), GAME_DAY)
        assert game.losing_team == "Utah"
        assert game.winning_team_score == "101"
        assert game.status is None

    def test_mismatched_period_counts_empty_both_lists(self):
        html = """
        <table><tbody><tr class="loser"><td><a>Utah</a></td></tr></tbody></table>
        <table><tbody>
          <tr><td><a>Utah</a></td><td class="center">20</td><td class="center">30</td></tr>
          <tr><td><a>Denver</a></td><td class="center">25</td></tr>
        </tbody></table>
        """
        game = parse_game_summary(self._block(html), GAME_DAY)
        assert game.away_quarter_score == []
        assert game.home_quarter_score == []
        assert game.away_team == "Utah"
        assert game.score_breakdown == "/boxscore/2018/10/16/UTA/DEN"

    def test_malformed_block_does_not_fail_the_day(self, scoreboard_soup):
        broken = BeautifulSoup(
            """
            <div class="game_summary">
              <table><tbody>
                <tr class="loser"><td><a>Utah</a></td><td class="right">99</td></tr>
                <tr class="winner"><td><a>Denver</a></td><td class="right">101</td></tr>
              </tbody></table>
              <table><tbody>
                <tr><td><a>Utah</a></td><td class="center">50</td><td class="center">49</td></tr>
              </tbody></table>
            </div>
            """,
            "lxml",
        ).select_one(".game_summary")
        good = scoreboard_soup.select_one(".game_summary")
        page = BeautifulSoup("<html><body></body></html>", "lxml")
        page.body.append(good)
        page.body.append(broken)

        games = parse_scoreboard(page, GAME_DAY)

        assert len(games) == 2
        assert games[0].home_quarter_score == ["21", "21", "31", "32"]
        assert games[1].winning_team == "Denver"
        assert games[1].away_quarter_score == []
        assert games[1].home_quarter_score == []
        assert games[1].home_team is None
        assert games[1].score_breakdown is None
