import os

import hypothesis

hypothesis.settings.register_profile('skicomb', deadline=None)
hypothesis.settings.register_profile('dev', deadline=None, max_examples=20)
hypothesis.settings.register_profile(
    'ci',
    deadline=None,
    max_examples=1000,
    suppress_health_check=[hypothesis.HealthCheck.too_slow],
)
hypothesis.settings.load_profile(
    os.environ.get('SKICOMB_HYPOTHESIS_PROFILE', 'skicomb'))
