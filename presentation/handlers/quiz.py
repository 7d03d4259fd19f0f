from aiohttp import web
import logging
from presentation.routers import router_quiz
from presentation.utils import error_handler, read_json, session_use_cases, scoring_use_cases


logger = logging.getLogger('handlers')


@router_quiz.post('/quiz/start')
@error_handler
async def start_quiz(request: web.Request):
    user = request['user']
    body = await read_json(request)
    logger.info("STARTING QUIZ", extra={'user': user.id})

    result = await session_use_cases(request['repo_service']).start_session(
        user_id=user.id,
        quiz_id=body.get('quizId'),
        team=body.get('team'),
    )
    return web.json_response({'success': True, **result.to_dict()})


@router_quiz.get('/quiz/current')
@error_handler
async def current_question(request: web.Request):
    user = request['user']
    result = await session_use_cases(request['repo_service']).get_current_question(user.id)
    return web.json_response(result.to_dict())


@router_quiz.post('/quiz/answer')
@error_handler
async def submit_answer(request: web.Request):
    user = request['user']
    body = await read_json(request)
    result = await session_use_cases(request['repo_service']).submit_answer(user.id, body.get('answer'))
    return web.json_response(result.to_dict())


@router_quiz.post('/quiz/finish')
@error_handler
async def finish_quiz(request: web.Request):
    user = request['user']
    logger.info("FINISHING QUIZ", extra={'user': user.id})
    # The ranking cache is invalidated by the scoring use case itself
    result = await scoring_use_cases(request['repo_service']).finish_quiz(user.id)
    return web.json_response({'success': True, **result.to_dict()})
