# Sales
from order_fulfillment.models.enums.sales_order_status import SalesOrderStatus
from order_fulfillment.models.enums.stock_status import StockStatus
from order_fulfillment.models.enums.item_progress import ItemProgress
from order_fulfillment.models.enums.deadline_status import DeadlineStatus

# Manufacturing
from order_fulfillment.models.enums.bom_component_type import BOMComponentType
