"""cli - check_cloudwatch 명령줄 인터페이스"""
