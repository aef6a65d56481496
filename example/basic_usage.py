"""
表达式树系统基本使用示例
"""
import sys
import os

# 添加src到路径
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from expression_tree import ExpressionTreeSystem
from expression_tree.core.node import ExpressionNode


def main():
    """主函数"""
    print("=" * 60)
    print("表达式树系统 - 基本使用示例")
    print("=" * 60)

    # 1. 创建系统实例
    print("\n1. 初始化系统...")
    system = ExpressionTreeSystem({
        "log_level": "INFO",
        "seed": 2024,
        "default_tree_size": 10
    })
    system.initialize()

    info = system.get_system_info()
    print(f"   系统名称: {info['system_name']}")
    print(f"   系统版本: {info['version']}")

    # 2. 随机生成表达式树
    print("\n2. 随机生成表达式树...")
    for tree_id, size in [("small", 1), ("medium", 10), ("large", 40)]:
        system.create_tree(tree_id, size=size)
        tree_info = system.get_tree_info(tree_id)
        print(f"   {tree_id}: 节点数={tree_info['size']}, 深度={tree_info['depth']}")
        print(f"     表达式: {tree_info['expression']}")
        print(f"     求值结果: {tree_info['value']:.6f}")

    # 3. 手工构造表达式树
    print("\n3. 手工构造表达式树 (- 10 3 2)...")
    root = ExpressionNode('-')
    for value in (10.0, 3.0, 2.0):
        root.add_child(ExpressionNode(value))
    system.add_tree("manual", root)
    print(f"   表达式: {system.render_tree('manual')}")
    print(f"   求值结果: {system.evaluate_tree('manual')}")

    # 4. 导出为表格
    print("\n4. 导出为表格...")
    df = system.export_tree("medium")
    print(df.to_string(index=False))

    print("\n" + "=" * 60)
    print("示例运行完成")
    print("=" * 60)


if __name__ == "__main__":
    main()
