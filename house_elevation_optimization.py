import pandas as pd

from ema_workbench import MultiprocessingEvaluator, Policy, Scenario
from ema_workbench.em_framework.optimization import EpsilonProgress
from ema_workbench.util import ema_logging

from house_elevation_function import REFERENCE_SCENARIO
from problem_formulation import get_model_for_problem_formulation


if __name__ == '__main__':
    ema_logging.log_to_stderr(ema_logging.INFO)

    house_model = get_model_for_problem_formulation(1)

    ref_scenario = Scenario('reference', **REFERENCE_SCENARIO)

    # a few fixed elevations, evaluated over sampled states of the world
    policies = [Policy('elevate {} ft'.format(h), elevation_ft=h)
                for h in (0, 3, 6, 9, 12)]

    convergence_metrics = [EpsilonProgress()]
    epsilons = [1e3] * len(house_model.outcomes)
    nfe = 2000

    with MultiprocessingEvaluator(house_model) as evaluator:
        experiments, outcomes = evaluator.perform_experiments(
                                    scenarios=1000, policies=policies)

        results, convergence = evaluator.optimize(nfe=nfe,
                                                  searchover='levers',
                                                  epsilons=epsilons,
                                                  convergence=convergence_metrics,
                                                  reference=ref_scenario)

    experiments.join(pd.DataFrame(outcomes)).to_csv('experiments.csv',
                                                    index=False)
    results.to_csv('optimization_results.csv', index=False)
    convergence.to_csv('convergence.csv', index=False)
