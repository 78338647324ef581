"""서비스 패키지.

Service package: business logic layer.

Services validate input, call repositories for DB operations and wrap the
results in response envelopes. They raise NotFoundError / BadRequestError;
routers never catch them.
"""
