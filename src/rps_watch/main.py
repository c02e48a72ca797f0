"""
剪刀石头布手表游戏主程序入口
Rock Paper Scissors Watch Game Main Entry
"""
import sys
import argparse
from .app import Application
from .utils.logger import setup_logger

logger = setup_logger("RPS.Main")


def main(argv=None):
    """主函数"""
    parser = argparse.ArgumentParser(description='剪刀石头布（三局两胜）')
    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='配置文件路径（默认: config/config.yaml）'
    )
    
    args = parser.parse_args(argv)
    
    logger.info("Rock Paper Scissors Watch Game Starting")
    
    app = Application(config_path=args.config)
    
    try:
        if not app.start():
            logger.error("应用程序启动失败")
            sys.exit(1)
    except Exception as e:
        logger.error(f"程序异常退出: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
