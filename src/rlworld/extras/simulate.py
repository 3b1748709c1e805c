"""
Runs a policy in an environment for a number of episodes, following the
agent loop:

    obs = env.reset()
    loop:
        obs, reward, done, info = env.step(policy(obs))
        if done: obs = env.reset()

Usage:

    > rlworld-simulate CartPole --episodes 5 --seed 0
    > python -m rlworld.extras.simulate -h
"""

from argparse import ArgumentParser
from typing import Callable, List, Union

import numpy as np

from ..environment import CallbackRenderer, CartPole, Environment, MountainCar

ENVIRONMENTS = {
    'CartPole': CartPole,
    'MountainCar': MountainCar,
}



def make(name: str, **kwargs) -> Environment:
    """
    Creates an environment by name.

    Args:
    * name: One of the keys in `ENVIRONMENTS`.
    * kwargs: Passed to the environment's constructor (`random_state`,
    `renderer`).
    """
    if name not in ENVIRONMENTS:
        raise KeyError('Environment: ' + name + ' is not defined. Choose from: '\
                       + ', '.join(ENVIRONMENTS))
    return ENVIRONMENTS[name](**kwargs)



def simulate(env: Union[str, Environment],
             policy: Callable[[np.ndarray], int]=None, episodes: int=3,
             maxsteps: int=None, render: bool=False,
             verbose: bool=True) -> List[float]:
    """
    Simulates a policy in an environment. Able to visualize behaviour or return
    statistics silently.

    Args:

    * env: A name in `ENVIRONMENTS` or an `Environment` instance itself.
    * policy: A function mapping an observation to an action. Defaults to
    uniformly random actions (as a benchmark).
    * episodes: Number of episodes to simulate over.
    * maxsteps: Steps after which an unfinished episode is cut short. Defaults
    to no limit.
    * render: Whether to call `render()` after each step.
    * verbose: Whether to print out total rewards after each episode.

    Returns:
    * A list of total rewards for each episode.
    """
    if isinstance(env, str):
        env = make(env)
    if policy is None:
        policy = lambda obs: env.action_space.sample()
    rewards = []
    state = env.reset()
    if render: env.render()
    reward = 0.
    steps = 0
    while len(rewards) < episodes:
        state, r, done, _ = env.step(policy(state))
        reward += r
        steps += 1
        if render: env.render()
        if done or (maxsteps is not None and steps >= maxsteps):
            if verbose: print('Reward: {}'.format(reward))
            rewards.append(reward)
            reward = 0.
            steps = 0
            if len(rewards) < episodes:
                state = env.reset()
    env.close()
    return rewards



def main(args=None):
    parser = ArgumentParser(description='Simulate a random policy in an environment.')
    parser.add_argument('env', choices=sorted(ENVIRONMENTS),
                        help='Name of environment.')
    parser.add_argument('-e', '--episodes', type=int, default=3,
                        help='Number of episodes to run.')
    parser.add_argument('-m', '--maxsteps', type=int, default=None,
                        help='Maximum steps per episode.')
    parser.add_argument('-s', '--seed', type=int, default=None,
                        help='Random seed.')
    parser.add_argument('-r', '--render', action='store_true', default=False,
                        help='Print the state after each step.')
    parser.add_argument('-q', '--quiet', action='store_true', default=False,
                        help='Do not print episode rewards.')
    args = parser.parse_args(args)

    renderer = CallbackRenderer(print) if args.render else None
    env = make(args.env, random_state=args.seed, renderer=renderer)
    rewards = simulate(env, episodes=args.episodes, maxsteps=args.maxsteps,
                       render=args.render, verbose=not args.quiet)
    if not args.quiet:
        print('Mean reward: {}'.format(np.mean(rewards)))
    return rewards



if __name__ == '__main__':
    main()
