"""rate a 1v1 between a new player and a stronger one, printing predictions before and ratings after"""
import logging
from skillrate import Env, GameResult, Rating


def main():
    logging.basicConfig(level=logging.DEBUG, format='%(asctime)s - %(levelname)s - %(message)s')
    team_1 = [Rating()]
    team_2 = [Rating(mu=35.0, sigma=7.0)]
    teams = [team_1, team_2]

    env = Env()
    draw_prob = env.predict_draw(teams)
    win_probs = env.predict_win(teams)
    print(f'teams: {teams}')
    print(f'draw probability: {draw_prob:.6f}, win probabilities: {win_probs}')

    new_ratings = env.rate(GameResult(teams=teams, ranks=[1, 2]))
    print(f'before: {teams}')
    print(f'after: {new_ratings}')
    print(f'ordinals: {[env.ordinal(team[0]) for team in new_ratings]}')


if __name__ == '__main__':
    main()
