"""Error values identifying the class and code location that reported a failure."""

from __future__ import annotations

from enum import IntEnum, auto

_UINT32_MAX = 0xFFFFFFFF
_UINT8_MAX = 0xFF


class ClassId(IntEnum):
    """Identifiers of the classes that can report errors."""

    ANALOG_DEVICES_AD5686 = 0
    ANALOG_DEVICES_LTC1867 = auto()
    BOSCH_BME280 = auto()
    CAN_HARDWARE = auto()
    EEPROM_EMULATION = auto()
    EXTERNAL_INTERRUPT_HARDWARE = auto()
    FIRMWARE_HEADER = auto()
    FIRMWARE_UPDATER = auto()
    FIRMWARE_VERIFIER = auto()
    FLASH_LOGGER = auto()
    FLASH_TESTER = auto()
    FLASH_TESTER_RANDOM = auto()
    FLASH_TESTER_READER = auto()
    FLASH_TESTER_WRITER = auto()
    FLASH_VERIFIER = auto()
    HAMMING_CODE = auto()
    I2C_EEPROM = auto()
    I2C_MASTER_HARDWARE = auto()
    I2C_SCANNER = auto()
    I2C_SLAVE_DEVICE = auto()
    I2C_SLAVE_HARDWARE = auto()
    I2C_SLAVE_REGISTER_DEVICE = auto()
    LOGGER = auto()
    LOGGER_ENTRY = auto()
    MICROCHIP_SST26VF016B = auto()
    MICROCHIP_MCP3426 = auto()
    ON_SEMI_LC709204F = auto()
    PNI_RM3100_I2C = auto()
    SECDED = auto()
    SOFT_I2C_MASTER = auto()
    SPI_MASTER_HARDWARE = auto()
    SPI_NOR_FLASH = auto()
    SPI_SLAVE_DEVICE = auto()
    SPI_SLAVE_HARDWARE = auto()
    SPI_SLAVE_REGISTER_DEVICE = auto()
    STM_LSM6DSO32_I2C = auto()
    STREAM_PROTOCOL = auto()
    TI_ADS1115 = auto()
    TI_DRV425 = auto()
    UART_HARDWARE = auto()

    SECTION_HARDWARE_BEGIN = 0x08000000

    SECTION_ANALOGIN_BEGIN = auto()
    STM32_ANALOG_IN = auto()
    STM32_ANALOG_IN_DMA = auto()
    STM32_ANALOG_IN_INJECTED = auto()
    ESP32S2_ANALOG_IN = auto()
    NETX90_ANALOG_IN = auto()
    NETX90_ANALOG_IN_DMA = auto()
    SECTION_ANALOGIN_END = auto()

    SECTION_ANALOGOUT_BEGIN = auto()
    STM32_ANALOG_OUT = auto()
    STM32_ANALOG_OUT_DMA = auto()
    SECTION_ANALOGOUT_END = auto()

    SECTION_BOOTLOADER_BEGIN = auto()
    SECTION_BOOTLOADER_END = auto()

    SECTION_CAN_BEGIN = auto()
    STM32_CAN = auto()
    SECTION_CAN_END = auto()

    SECTION_CRITICAL_SECTION_BEGIN = auto()
    SECTION_CRITICAL_SECTION_END = auto()

    SECTION_EXTERNAL_INTERRUPT_BEGIN = auto()
    STM32_EXTERNAL_INTERRUPT = auto()
    NETX90_EXTERNAL_INTERRUPT = auto()
    SECTION_EXTERNAL_INTERRUPT_END = auto()

    SECTION_FLASH_BEGIN = auto()
    QT_FLASH = auto()
    STM32_FLASH = auto()
    ESP32S2_SPI_FLASH = auto()
    SECTION_FLASH_END = auto()

    SECTION_GPIO_BEGIN = auto()
    NETX90_GPIO = auto()
    SECTION_GPIO_END = auto()

    SECTION_I2C_MASTER_BEGIN = auto()
    STM32F1_I2C_MASTER = auto()
    STM32F3_I2C_MASTER = auto()
    STM32F4_I2C_MASTER = auto()
    STM32F7_I2C_MASTER = auto()
    STM32_I2C_MASTER = auto()
    STM32L0_I2C_MASTER = auto()
    ESP32S2_I2C_MASTER = auto()
    NETX90_I2C_MASTER = auto()
    SECTION_I2C_MASTER_END = auto()

    SECTION_I2C_SLAVE_BEGIN = auto()
    STM32F1_I2C_SLAVE = auto()
    STM32F3_I2C_SLAVE = auto()
    STM32F4_I2C_SLAVE = auto()
    STM32F7_I2C_SLAVE = auto()
    STM32_I2C_SLAVE = auto()
    STM32L0_I2C_SLAVE = auto()
    SECTION_I2C_SLAVE_END = auto()

    SECTION_INPUT_CAPTURE_BEGIN = auto()
    STM32_INPUT_CAPTURE = auto()
    SECTION_INPUT_CAPTURE_END = auto()

    SECTION_POWER_BEGIN = auto()
    SECTION_POWER_END = auto()

    SECTION_PWM_BEGIN = auto()
    STM32_PWM = auto()
    ESP32S2_LED_CONTROL_PWM = auto()
    NETX90_PWM = auto()
    SECTION_PWM_END = auto()

    SECTION_RTC_BEGIN = auto()
    STM32_RTC = auto()
    SECTION_RTC_END = auto()

    SECTION_SPI_MASTER_BEGIN = auto()
    STM32_SPI_MASTER = auto()
    NETX90_SPI_MASTER = auto()
    SECTION_SPI_MASTER_END = auto()

    SECTION_SPI_SLAVE_BEGIN = auto()
    STM32_SPI_SLAVE = auto()
    SECTION_SPI_SLAVE_END = auto()

    SECTION_TIMER_BEGIN = auto()
    STM32_TIMER = auto()
    ESP32S2_TIMER = auto()
    ESP32S2_TIMER_PERIPHERAL = auto()
    NETX90_TIMER = auto()
    SECTION_TIMER_END = auto()

    SECTION_OUTPUT_COMPARE_BEGIN = auto()
    STM32_OUTPUT_COMPARE = auto()
    SECTION_OUTPUT_COMPARE_END = auto()

    SECTION_UART_BEGIN = auto()
    STM32_UART = auto()
    ESP32S2_UART = auto()
    QT_UART = auto()
    NETX90_UART = auto()
    SECTION_UART_END = auto()

    SECTION_USB_VCP_BEGIN = auto()
    STM32F4_USB_VCP = auto()
    STM32F7_USB_VCP = auto()
    STM32G0_USB_VCP = auto()
    SECTION_USB_VCP_END = auto()

    SECTION_HARDWARE_END = 0x0FFFFFFF

    SECTION_USER_BEGIN = 0x10000000
    SECTION_USER_END = 0xFFFFFFFF


class Error(Exception):
    """An error tagged with the reporting class id and a code within that class.

    It can be passed to error handlers as a value or raised as an exception.
    User-defined class ids from the user section are accepted as plain ints.
    """

    def __init__(self, class_id: int, error_code: int) -> None:
        class_id = int(class_id)
        error_code = int(error_code)
        if not 0 <= class_id <= _UINT32_MAX:
            raise ValueError(f"class id out of range: {class_id}")
        if not 0 <= error_code <= _UINT8_MAX:
            raise ValueError(f"error code out of range: {error_code}")
        super().__init__(class_id, error_code)
        self.class_id = class_id
        self.error_code = error_code

    def is_hardware_error(self) -> bool:
        """Return True if the error comes from a class in the hardware section."""
        return ClassId.SECTION_HARDWARE_BEGIN < self.class_id < ClassId.SECTION_HARDWARE_END

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Error):
            return NotImplemented
        return (self.class_id, self.error_code) == (other.class_id, other.error_code)

    def __hash__(self) -> int:
        return hash((self.class_id, self.error_code))

    def __repr__(self) -> str:
        try:
            name = ClassId(self.class_id).name
        except ValueError:
            name = hex(self.class_id)
        return f"Error(class_id={name}, error_code={self.error_code})"

    def __str__(self) -> str:
        return repr(self)