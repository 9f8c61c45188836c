"""CreateBill Use Case

Turns a cart into a bill: validates stock, takes the bags out of stock,
assigns the next bill number and stores the bill, all in one transaction.
"""

import logging
from collections import OrderedDict
from decimal import Decimal
from typing import Dict, List
from sqlalchemy.exc import IntegrityError
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.product_repository import ProductRepository
from src.app.repositories.bill_repository import BillRepository
from src.app.repositories.bill_item_repository import BillItemRepository
from src.app.repositories.bill_sequence_repository import BillSequenceRepository
from src.domain.base import to_money
from src.domain.bill import Bill, CustomerType
from src.domain.bill_item import BillItem
from src.domain.product import Product
from .dtos import CreateBillCommandDTO, BillResponseDTO

logger = logging.getLogger(__name__)


class CreateBill:
    """
    Use Case: Create a bill from a cart

    Business Rules:
    1. Every product must exist
    2. Requested bags (summed per product) must not exceed stock
    3. Totals are computed from catalog prices, never from client prices
    4. Wholesaler totals add CGST + SGST + IGST to the item subtotal
    5. paid_amount defaults to 0 and may not exceed the total
    6. Stock decrement, numbering and bill insert commit together or not at all

    Flow:
    1. Validate customer and load products with lock (SELECT FOR UPDATE)
    2. Validate stock and compute totals
    3. Validate paid amount
    4. Decrement stock (guarded against concurrent sales)
    5. Take next bill number from the sequence
    6. Create bill and line items
    7. Commit transaction
    8. Return response
    """

    def __init__(
        self,
        uow: UnitOfWork,
        product_repo: ProductRepository,
        bill_repo: BillRepository,
        bill_item_repo: BillItemRepository,
        sequence_repo: BillSequenceRepository,
    ):
        self.uow = uow
        self.product_repo = product_repo
        self.bill_repo = bill_repo
        self.bill_item_repo = bill_item_repo
        self.sequence_repo = sequence_repo

    async def execute(self, command: CreateBillCommandDTO) -> Result[BillResponseDTO]:
        """
        Execute bill creation

        Args:
            command: CreateBillCommandDTO with customer details, cart and paid amount

        Returns:
            Result[BillResponseDTO]: Success with the stored bill or error
        """
        try:
            # Step 1: Validate customer and load products
            customer_name = (command.customer_name or "").strip()
            if not customer_name:
                return Return.err(
                    Error(
                        code="VALIDATION_ERROR",
                        message="Please provide a customer name",
                        reason="customer_name is blank",
                    )
                )

            requested: Dict[str, int] = OrderedDict()
            for item in command.items:
                requested[item.product_id] = requested.get(item.product_id, 0) + item.quantity

            products: Dict[str, Product] = {}
            for item in command.items:
                if item.product_id in products:
                    continue
                product = await self.product_repo.get_by_id(item.product_id, for_update=True)
                if not product:
                    attempted = item.product_name or item.product_id
                    return Return.err(
                        Error(
                            code="PRODUCT_NOT_FOUND",
                            message=f"Product not found: {attempted}",
                            reason=f"product_id={item.product_id}",
                        )
                    )
                products[item.product_id] = product

            # Step 2: Validate stock for the whole cart before touching anything
            for product_id, quantity in requested.items():
                product = products[product_id]
                if product.stock < quantity:
                    return Return.err(
                        Error(
                            code="INSUFFICIENT_STOCK",
                            message=f"Insufficient stock for {product.name}",
                            reason=f"stock={product.stock}, requested={quantity}",
                        )
                    )

            lines = self._price_lines(command, products)
            subtotal = to_money(sum((line.line_total for line in lines), Decimal("0")))

            wholesale = command.customer_type == CustomerType.WHOLESALER
            cgst = to_money(command.cgst) if wholesale else to_money(0)
            sgst = to_money(command.sgst) if wholesale else to_money(0)
            igst = to_money(command.igst) if wholesale else to_money(0)
            total = subtotal + cgst + sgst + igst

            # Step 3: Validate paid amount
            paid = to_money(command.paid_amount)
            due = total - paid
            if due < 0:
                return Return.err(
                    Error(
                        code="OVER_PAYMENT",
                        message=f"Paid amount {paid} exceeds bill total {total}",
                        reason=f"total={total}, paid={paid}",
                    )
                )

            # Step 4: Decrement stock
            for product_id, quantity in requested.items():
                taken = await self.product_repo.decrement_stock(product_id, quantity)
                if not taken:
                    # Rollback expires loaded products
                    name = products[product_id].name
                    await self.uow.rollback()
                    logger.warning(
                        f"Stock for {name} changed during billing, requested={quantity}"
                    )
                    return Return.err(
                        Error(
                            code="INSUFFICIENT_STOCK",
                            message=f"Insufficient stock for {name}",
                            reason="Stock was taken by a concurrent bill",
                        )
                    )

            # Step 5: Next bill number
            bill_number = await self.sequence_repo.next_value()

            # Step 6: Create bill and line items
            bill = Bill(
                bill_number=bill_number,
                customer_name=customer_name,
                customer_phone=command.customer_phone,
                customer_address=command.customer_address,
                customer_type=command.customer_type,
                customer_gstin=command.customer_gstin,
                customer_cst=command.customer_cst,
                customer_tin=command.customer_tin,
                hsn_code=command.hsn_code,
                vehicle_no=command.vehicle_no,
                supplier_ref=command.supplier_ref,
                book_no=command.book_no,
                cgst=cgst,
                sgst=sgst,
                igst=igst,
                subtotal_amount=subtotal,
                total_amount=total,
                paid_amount=paid,
                due_amount=due,
            )
            created_bill = await self.bill_repo.create(bill)

            for line in lines:
                line.bill_id = created_bill.id
            created_items = await self.bill_item_repo.create_many(lines)

            # Step 7: Commit transaction
            await self.uow.commit()

            logger.info(
                f"Bill {created_bill.bill_number} created for {customer_name}: "
                f"total={total}, paid={paid}, due={due}"
            )

            # Step 8: Build response
            return Return.ok(BillResponseDTO.from_entities(created_bill, created_items))

        except IntegrityError as e:
            await self.uow.rollback()
            logger.warning(f"Bill creation conflicted: {e}")
            return Return.err(
                Error(
                    code="BILL_NUMBER_CONFLICT",
                    message="Another bill was created at the same time, please retry",
                    reason=str(e),
                )
            )

        except Exception as e:
            await self.uow.rollback()
            logger.exception("Bill creation failed")
            return Return.err(
                Error(
                    code="CREATE_BILL_FAILED",
                    message="Failed to create bill",
                    reason=str(e),
                )
            )

    def _price_lines(
        self, command: CreateBillCommandDTO, products: Dict[str, Product]
    ) -> List[BillItem]:
        """Build line items priced from the catalog"""
        lines = []
        for position, item in enumerate(command.items):
            product = products[item.product_id]
            unit_price = to_money(product.price)

            if item.price is not None and to_money(item.price) != unit_price:
                logger.warning(
                    f"Cart price {item.price} for {product.name} differs from "
                    f"catalog price {unit_price}; billing at catalog price"
                )

            lines.append(
                BillItem(
                    product_id=product.id,
                    product_name=product.name,
                    quantity=item.quantity,
                    unit_price=unit_price,
                    bag_weight=product.bag_weight or item.bag_weight,
                    line_total=to_money(unit_price * item.quantity),
                    position=position,
                )
            )
        return lines
