from aiohttp import web


router_quiz = web.RouteTableDef()
router_user = web.RouteTableDef()
router_ranking = web.RouteTableDef()
router_system = web.RouteTableDef()
